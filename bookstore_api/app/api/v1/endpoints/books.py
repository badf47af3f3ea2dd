"""
Book endpoints for API v1.

These routes expose a lenient CRUD API for books.  Existing clients
depend on the leniency, so none of these handlers ever answers 404:

* a lookup of an unknown (or unparsable) id returns ``200`` with ``{}``;
* ``PUT`` on an unknown id creates the book under exactly that id;
* ``DELETE`` answers ``204`` whether or not a book was removed.

Ids in the path are read with ``parse_leading_int``, so ``/books/1.99``
addresses book 1 and ``/books/abc`` addresses nothing.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from bookstore_api.app.api.v1.deps import request_fields
from bookstore_api.app.core.coercion import parse_leading_int
from bookstore_api.app.core.storage import get_book_store
from bookstore_api.app.schemas.book import Book
from bookstore_api.app.services.entity_store import EntityStore

router = APIRouter()


@router.get("", response_model=List[Book], response_model_exclude_unset=True)
async def list_books(store: EntityStore[Book] = Depends(get_book_store)) -> List[Book]:
    """Return every book in insertion order."""
    return store.list_all()


@router.get("/{book_id}", response_model=Book, response_model_exclude_unset=True)
async def get_book(book_id: str, store: EntityStore[Book] = Depends(get_book_store)) -> Book:
    """Retrieve a single book by ID.

    Unknown ids yield an empty record, serialized as ``{}``.
    """
    return store.get_by_id(parse_leading_int(book_id))


@router.post("", response_model=Book, response_model_exclude_unset=True, status_code=status.HTTP_201_CREATED)
async def create_book(
    fields: Dict[str, Any] = Depends(request_fields),
    store: EntityStore[Book] = Depends(get_book_store),
) -> Book:
    """Add a new book under the next free id.

    Missing fields are left out of the record rather than rejected;
    non-numeric ids and years are stored as ``null``.
    """
    return store.create(fields)


@router.put("/{book_id}", response_model=Book, response_model_exclude_unset=True)
async def upsert_book(
    book_id: str,
    fields: Dict[str, Any] = Depends(request_fields),
    store: EntityStore[Book] = Depends(get_book_store),
) -> Book:
    """Update a book, or create it under ``book_id`` if it does not exist.

    Only fields with a truthy value overwrite the stored ones, so a
    partial body leaves the other fields as they were.  Both outcomes
    answer 200.
    """
    book, _created = store.upsert_by_id(parse_leading_int(book_id), fields)
    return book


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(book_id: str, store: EntityStore[Book] = Depends(get_book_store)) -> None:
    """Remove a book; unknown ids are ignored."""
    store.delete_by_id(parse_leading_int(book_id))
    return None
