"""Pydantic schemas for authors."""

from typing import Any, Optional

from pydantic import BaseModel

from bookstore_api.app.core.coercion import verbatim


class Author(BaseModel):
    """A stored author."""

    id: Optional[int] = None
    name: Any = None


AUTHOR_FIELDS = {"name": verbatim}

AUTHOR_SEED = [
    {"id": 1, "name": "F. Scott Fitzgerald"},
    {"id": 2, "name": "Harper Lee"},
]
