"""
Catalog package for the book catalog API.

This package contains the schemas, the in-memory store and the route
definitions that expose a small REST API for keeping a reading list:
books can be added, listed with filters, fetched, replaced and removed.
The store keeps everything in process memory; swap ``BookRepository``
for another implementation should persistence ever be needed.
"""

from .router import router as catalog_router  # noqa: F401
from .store import BookRepository  # noqa: F401
