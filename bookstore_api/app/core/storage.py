"""
In-memory storage owned by the application.

All data lives in three ``EntityStore`` instances grouped in an
``Inventory``.  ``init_storage`` attaches a fresh inventory to
``app.state`` when the application is created; the ``get_*_store``
helpers are FastAPI dependencies that hand the right store to each
route.  Nothing is persisted: every restart begins from the seed data.
"""

from typing import Iterator, Optional

from fastapi import Depends, FastAPI, Request

from bookstore_api.app.schemas.author import AUTHOR_FIELDS, AUTHOR_SEED, Author
from bookstore_api.app.schemas.book import BOOK_FIELDS, BOOK_SEED, Book
from bookstore_api.app.schemas.category import CATEGORY_FIELDS, CATEGORY_SEED, Category
from bookstore_api.app.services.entity_store import EntityStore


class Inventory:
    """The books, authors and categories held by one application."""

    def __init__(self) -> None:
        self.books: EntityStore[Book] = EntityStore("book", Book, BOOK_FIELDS, BOOK_SEED)
        self.authors: EntityStore[Author] = EntityStore("author", Author, AUTHOR_FIELDS, AUTHOR_SEED)
        self.categories: EntityStore[Category] = EntityStore(
            "category", Category, CATEGORY_FIELDS, CATEGORY_SEED
        )

    def stores(self) -> Iterator[EntityStore]:
        yield self.books
        yield self.authors
        yield self.categories

    def reset(self) -> None:
        """Restore every store to its seed records and counter."""
        for store in self.stores():
            store.reset()


def init_storage(app: FastAPI, inventory: Optional[Inventory] = None) -> Inventory:
    """Attach ``inventory`` (or a new one) to ``app.state``."""
    app.state.inventory = inventory if inventory is not None else Inventory()
    return app.state.inventory


def get_inventory(request: Request) -> Inventory:
    return request.app.state.inventory


def get_book_store(inventory: Inventory = Depends(get_inventory)) -> EntityStore[Book]:
    return inventory.books


def get_author_store(inventory: Inventory = Depends(get_inventory)) -> EntityStore[Author]:
    return inventory.authors


def get_category_store(inventory: Inventory = Depends(get_inventory)) -> EntityStore[Category]:
    return inventory.categories
