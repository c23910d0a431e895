"""Service layer for the bookstore.

Implements the application use-cases as two façades over in-memory
collections: `BookCatalog` and `UserDirectory`. Each component owns exactly one
backing collection, passed in through its constructor.

Dependency rule: may import `bookstore.domain`, but not `bookstore.adapters` or
`bookstore.entrypoints`.
"""

from .book_catalog import BookCatalog
from .user_directory import UserDirectory

__all__ = ["BookCatalog", "UserDirectory"]
