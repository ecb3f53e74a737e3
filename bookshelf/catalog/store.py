"""
In-memory data store for the catalogue API.

``BookRepository`` owns the ordered list of ``Book`` records for one
application instance. The app factory creates it and hands it to the
routes through a dependency, so nothing here is process-wide state.
Records live only as long as the process; swap this class for a
database-backed one if durability is ever needed.

Every public method takes the repository lock, which makes each
operation atomic with respect to the others. FastAPI runs sync route
handlers in a threadpool, so concurrent requests do reach this object
from several threads.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import List, Optional

from .schemas import Book, BookPayload


logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for failures reported back to the client."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookValidationError(CatalogError):
    status_code = 400


class BookNotFoundError(CatalogError):
    status_code = 404


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _lower(s: Optional[str]) -> str:
    return (s or "").lower()


def _validate(payload: BookPayload, action: str) -> None:
    """Check the two catalog rules for a create or update request.

    Parameters
    ----------
    payload : BookPayload
        The request body.
    action : str
        Verb used in the error message (``"add"`` or ``"update"``).

    Raises
    ------
    BookValidationError
        When the name is missing or blank, or when ``readPage`` exceeds
        ``pageCount``.
    """
    if not (payload.name or "").strip():
        raise BookValidationError(
            f"Failed to {action} book. Please fill in the book name"
        )
    if (payload.read_page or 0) > (payload.page_count or 0):
        raise BookValidationError(
            f"Failed to {action} book. readPage cannot be greater than pageCount"
        )


def _fields(payload: BookPayload) -> dict:
    """Mutable record fields derived from a validated payload.

    ``null`` page counts are stored as 0 and a ``null`` reading flag as
    ``False``.
    """
    page_count = payload.page_count or 0
    read_page = payload.read_page or 0
    return {
        "name": payload.name,
        "year": payload.year,
        "author": payload.author,
        "summary": payload.summary,
        "publisher": payload.publisher,
        "page_count": page_count,
        "read_page": read_page,
        "reading": bool(payload.reading),
        "finished": page_count == read_page,
    }


class BookRepository:
    """Ordered, lock-protected collection of books."""

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: str) -> int:
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        return -1

    def add(self, payload: BookPayload) -> Book:
        _validate(payload, "add")
        now = _now()
        with self._lock:
            book = Book(inserted_at=now, updated_at=now, **_fields(payload))
            # ids are unique within the collection
            while self._index_of(book.id) != -1:
                book = Book(inserted_at=now, updated_at=now, **_fields(payload))
            self._books.append(book)
        logger.info("Book added: id=%s name=%r", book.id, book.name)
        return book

    def list(
        self,
        name: Optional[str] = None,
        reading: Optional[bool] = None,
        finished: Optional[bool] = None,
    ) -> List[Book]:
        """Return the books matching every given filter.

        Parameters
        ----------
        name : Optional[str]
            Case-insensitive substring the book name must contain. ``None``
            or an empty string disables the filter.
        reading : Optional[bool]
            Required value of ``reading``; ``None`` disables the filter.
        finished : Optional[bool]
            Required value of ``finished``; ``None`` disables the filter.

        Returns
        -------
        List[Book]
            A new list in insertion order. Later changes to the repository
            do not affect it.
        """
        needle = _lower(name)
        with self._lock:
            items = list(self._books)

        if needle:
            items = [b for b in items if needle in _lower(b.name)]
        if reading is not None:
            items = [b for b in items if b.reading == reading]
        if finished is not None:
            items = [b for b in items if b.finished == finished]
        return items

    def get(self, book_id: str) -> Book:
        with self._lock:
            index = self._index_of(book_id)
            if index == -1:
                raise BookNotFoundError("Book not found")
            return self._books[index].model_copy()

    def update(self, book_id: str, payload: BookPayload) -> Book:
        """Replace every mutable field of an existing book.

        The lookup happens before the payload is validated, so an unknown
        id is reported as not found even when the body is also invalid.
        ``id`` and ``inserted_at`` are kept; ``updated_at`` is refreshed.
        """
        with self._lock:
            index = self._index_of(book_id)
            if index == -1:
                raise BookNotFoundError("Failed to update book. Id not found")
            _validate(payload, "update")
            book = self._books[index].model_copy(
                update={**_fields(payload), "updated_at": _now()}
            )
            self._books[index] = book
        logger.info("Book updated: id=%s", book_id)
        return book

    def delete(self, book_id: str) -> Book:
        with self._lock:
            index = self._index_of(book_id)
            if index == -1:
                raise BookNotFoundError("Failed to delete book. Id not found")
            book = self._books.pop(index)
        logger.info("Book deleted: id=%s", book_id)
        return book
