"""Pydantic schemas for categories."""

from typing import Any, Optional

from pydantic import BaseModel

from bookstore_api.app.core.coercion import verbatim


class Category(BaseModel):
    id: Optional[int] = None
    name: Any = None


CATEGORY_FIELDS = {"name": verbatim}

CATEGORY_SEED = [
    {"id": 1, "name": "Fiction"},
    {"id": 2, "name": "Classic"},
]
