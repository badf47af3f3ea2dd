"""
Pydantic schemas for books.

A book references an author and a category by id.  The references are
not checked; a book may point at an author that does not exist.
Numeric fields are read with ``parse_leading_int`` so ``"1949"`` and
``1949`` are stored alike, and unparsable input is stored as not a
number (``null``).
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from bookstore_api.app.core.coercion import parse_leading_int, verbatim


class Book(BaseModel):
    """A stored book."""

    id: Optional[int] = None
    title: Any = Field(None, description="Book title, stored verbatim")
    author_id: Optional[int] = None
    category_id: Optional[int] = None
    published_year: Optional[int] = None


BOOK_FIELDS = {
    "title": verbatim,
    "author_id": parse_leading_int,
    "category_id": parse_leading_int,
    "published_year": parse_leading_int,
}

BOOK_SEED = [
    {"id": 1, "title": "The Great Gatsby", "author_id": 1, "category_id": 1, "published_year": 1925},
    {"id": 2, "title": "To Kill a Mockingbird", "author_id": 2, "category_id": 2, "published_year": 1960},
]
