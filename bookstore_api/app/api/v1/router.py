"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers under a unified prefix.
When a new entity is introduced, update this file to include its
router.
"""

from fastapi import APIRouter

from .endpoints import authors, books, categories

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(authors.router, prefix="/authors", tags=["authors"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
