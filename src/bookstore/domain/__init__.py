"""Domain layer for the bookstore.

Contains the plain records (`Book`, `User`) and the domain error types. This
package is deliberately technology-agnostic.

Dependency rule: do not import from `bookstore.adapters` or `bookstore.entrypoints`.
"""

from .errors import BookstoreError, InvalidBookError, NullArgumentError
from .models import Book, User

__all__ = ["Book", "User", "BookstoreError", "InvalidBookError", "NullArgumentError"]
