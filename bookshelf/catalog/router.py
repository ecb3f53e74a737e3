"""
Route definitions for the catalogue API.

Endpoints:
- POST   /books            : add a book
- GET    /books            : list books (summary view) with filters
- GET    /books/{book_id}  : get one book
- PUT    /books/{book_id}  : replace a book's fields
- DELETE /books/{book_id}  : remove a book

Catalog failures are raised as ``CatalogError`` subclasses and turned
into ``{"status": "fail", "message": ...}`` bodies by the handler
registered in ``bookshelf.main``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from .schemas import (
    BookCreatedResponse,
    BookDetail,
    BookDetailResponse,
    BookId,
    BookList,
    BookListResponse,
    BookPayload,
    BookSummary,
    FailResponse,
    MessageResponse,
)
from .store import BookRepository, BookValidationError


TRUE_FLAGS = {"1", "true"}
FALSE_FLAGS = {"0", "false"}

router = APIRouter(tags=["books"])

_fail = {"model": FailResponse}


def get_repository(request: Request) -> BookRepository:
    """Return the repository owned by the running application."""
    return request.app.state.books


def _parse_flag(name: str, value: Optional[str]) -> Optional[bool]:
    """Turn a boolean query flag into ``True``/``False``/``None``.

    ``1``/``true`` and ``0``/``false`` are accepted, case-insensitively.
    A missing or empty flag means "do not filter".
    """
    if value is None or not value.strip():
        return None
    v = value.strip().lower()
    if v in TRUE_FLAGS:
        return True
    if v in FALSE_FLAGS:
        return False
    raise BookValidationError(
        f"Invalid value for query flag '{name}': use 1/true or 0/false"
    )


@router.post(
    "/books",
    status_code=201,
    response_model=BookCreatedResponse,
    responses={400: _fail},
)
def add_book(
    payload: BookPayload = Body(...),
    repo: BookRepository = Depends(get_repository),
) -> BookCreatedResponse:
    book = repo.add(payload)
    return BookCreatedResponse(
        message="Book added successfully",
        data=BookId(book_id=book.id),
    )


@router.get("/books", response_model=BookListResponse, responses={400: _fail})
def list_books(
    name: Optional[str] = Query(default=None, description="Name contains (case-insensitive)"),
    reading: Optional[str] = Query(default=None, description="1/true or 0/false"),
    finished: Optional[str] = Query(default=None, description="1/true or 0/false"),
    repo: BookRepository = Depends(get_repository),
) -> BookListResponse:
    books = repo.list(
        name=name,
        reading=_parse_flag("reading", reading),
        finished=_parse_flag("finished", finished),
    )
    summaries = [
        BookSummary(id=b.id, name=b.name, publisher=b.publisher) for b in books
    ]
    return BookListResponse(data=BookList(books=summaries))


@router.get(
    "/books/{book_id}",
    response_model=BookDetailResponse,
    responses={404: _fail},
)
def get_book(
    book_id: str,
    repo: BookRepository = Depends(get_repository),
) -> BookDetailResponse:
    return BookDetailResponse(data=BookDetail(book=repo.get(book_id)))


@router.put(
    "/books/{book_id}",
    response_model=MessageResponse,
    responses={400: _fail, 404: _fail},
)
def update_book(
    book_id: str,
    payload: BookPayload = Body(...),
    repo: BookRepository = Depends(get_repository),
) -> MessageResponse:
    repo.update(book_id, payload)
    return MessageResponse(message="Book updated successfully")


@router.delete(
    "/books/{book_id}",
    response_model=MessageResponse,
    responses={404: _fail},
)
def delete_book(
    book_id: str,
    repo: BookRepository = Depends(get_repository),
) -> MessageResponse:
    repo.delete(book_id)
    return MessageResponse(message="Book deleted successfully")
