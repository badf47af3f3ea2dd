"""Category endpoints for API v1."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from bookstore_api.app.api.v1.deps import request_fields
from bookstore_api.app.core.coercion import parse_leading_int
from bookstore_api.app.core.storage import get_category_store
from bookstore_api.app.schemas.category import Category
from bookstore_api.app.services.entity_store import EntityStore

router = APIRouter()


@router.get("", response_model=List[Category], response_model_exclude_unset=True)
async def list_categories(store: EntityStore[Category] = Depends(get_category_store)) -> List[Category]:
    return store.list_all()


@router.get("/{category_id}", response_model=Category, response_model_exclude_unset=True)
async def get_category(category_id: str, store: EntityStore[Category] = Depends(get_category_store)) -> Category:
    return store.get_by_id(parse_leading_int(category_id))


@router.post("", response_model=Category, response_model_exclude_unset=True, status_code=status.HTTP_201_CREATED)
async def create_category(
    fields: Dict[str, Any] = Depends(request_fields),
    store: EntityStore[Category] = Depends(get_category_store),
) -> Category:
    return store.create(fields)


@router.put("/{category_id}", response_model=Category, response_model_exclude_unset=True)
async def upsert_category(
    category_id: str,
    fields: Dict[str, Any] = Depends(request_fields),
    store: EntityStore[Category] = Depends(get_category_store),
) -> Category:
    # Unknown ids are created, known ones get a truthy-gated rename.
    category, _created = store.upsert_by_id(parse_leading_int(category_id), fields)
    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str, store: EntityStore[Category] = Depends(get_category_store)) -> None:
    store.delete_by_id(parse_leading_int(category_id))
    return None
