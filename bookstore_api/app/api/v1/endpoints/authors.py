"""
Author endpoints for API v1.

Same contract as the book endpoints: unknown ids read as ``{}``,
``PUT`` upserts and ``DELETE`` always answers 204.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from bookstore_api.app.api.v1.deps import request_fields
from bookstore_api.app.core.coercion import parse_leading_int
from bookstore_api.app.core.storage import get_author_store
from bookstore_api.app.schemas.author import Author
from bookstore_api.app.services.entity_store import EntityStore

router = APIRouter()


@router.get("", response_model=List[Author], response_model_exclude_unset=True)
async def list_authors(store: EntityStore[Author] = Depends(get_author_store)) -> List[Author]:
    return store.list_all()


@router.get("/{author_id}", response_model=Author, response_model_exclude_unset=True)
async def get_author(author_id: str, store: EntityStore[Author] = Depends(get_author_store)) -> Author:
    """Retrieve a single author by ID, or ``{}``."""
    return store.get_by_id(parse_leading_int(author_id))


@router.post("", response_model=Author, response_model_exclude_unset=True, status_code=status.HTTP_201_CREATED)
async def create_author(
    fields: Dict[str, Any] = Depends(request_fields),
    store: EntityStore[Author] = Depends(get_author_store),
) -> Author:
    """Add a new author."""
    return store.create(fields)


@router.put("/{author_id}", response_model=Author, response_model_exclude_unset=True)
async def upsert_author(
    author_id: str,
    fields: Dict[str, Any] = Depends(request_fields),
    store: EntityStore[Author] = Depends(get_author_store),
) -> Author:
    """Rename an author, or create one under ``author_id``."""
    author, _created = store.upsert_by_id(parse_leading_int(author_id), fields)
    return author


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(author_id: str, store: EntityStore[Author] = Depends(get_author_store)) -> None:
    store.delete_by_id(parse_leading_int(author_id))
    return None
