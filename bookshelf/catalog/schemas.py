"""
Pydantic schema definitions for the catalog module.

``BookPayload`` is the request body accepted by the create and update
endpoints. ``Book`` is the full stored record and ``BookSummary`` the
narrow projection returned by the list endpoint. The remaining models
are the JSON envelopes every endpoint answers with: a ``status`` of
``"success"`` or ``"fail"``, an optional human readable ``message`` and,
for reads, a ``data`` object.

Field names travel in camelCase on the wire (``pageCount``,
``insertedAt``...) while the Python attributes stay snake_case.
"""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookPayload(CamelModel):
    """Client supplied fields for creating or replacing a book.

    ``name`` is optional here: a missing name is reported by the store with
    its own message, after the book lookup, rather than as a schema error.
    """

    name: Optional[str] = None
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: Optional[int] = Field(default=0, ge=0)
    read_page: Optional[int] = Field(default=0, ge=0)
    reading: Optional[bool] = False


class Book(CamelModel):
    """A stored book record."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: int = 0
    read_page: int = 0
    finished: bool = False
    reading: bool = False
    inserted_at: datetime
    updated_at: datetime


class BookSummary(CamelModel):
    id: str
    name: str
    publisher: Optional[str] = None


class BookId(CamelModel):
    book_id: str


class BookList(BaseModel):
    books: List[BookSummary] = Field(default_factory=list)


class BookDetail(BaseModel):
    book: Book


class SuccessResponse(BaseModel):
    status: str = "success"


class MessageResponse(SuccessResponse):
    message: str


class BookCreatedResponse(MessageResponse):
    data: BookId


class BookListResponse(SuccessResponse):
    data: BookList


class BookDetailResponse(SuccessResponse):
    data: BookDetail


class FailResponse(BaseModel):
    status: str = "fail"
    message: str
