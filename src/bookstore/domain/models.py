"""Plain records for books and users.

Both records are mutable dataclasses compared structurally: two books (or two
users) are equal when all of their fields match. Neither carries a separate
identifier; a user's `username` acts as its key within a `UserDirectory`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from .errors import InvalidBookError


@dataclass(slots=True)
class Book:
    """A book offered in the catalog.

    Conventions:
      - `price` is stored as a `Decimal`; floats are converted through their
        string form so `10.99` becomes `Decimal("10.99")`.
      - `reviews` keeps insertion order and may contain `None` entries.
    """

    title: str
    author: str
    genre: str
    price: Decimal
    reviews: list[str | None] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            try:
                self.price = Decimal(str(self.price))
            except InvalidOperation as e:
                raise InvalidBookError(
                    self.title, f"price {self.price!r} is not a decimal number"
                ) from e
        # NaN never equals itself, which would defeat duplicate detection
        if not self.price.is_finite():
            raise InvalidBookError(self.title, f"price {self.price} is not finite")


@dataclass(slots=True)
class User:
    """A registered (or registrable) bookstore user."""

    username: str
    password: str = field(repr=False)
    email: str
    purchased_books: list[Book] = field(default_factory=list)

    def has_purchased(self, book: Book) -> bool:
        """Return True if `book` (by identity or structural equality) was purchased."""
        return book in self.purchased_books
