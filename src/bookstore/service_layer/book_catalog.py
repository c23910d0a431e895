"""Book catalog service.

`BookCatalog` is a façade over a single ordered list of `Book` records. The
list is either supplied by the caller (so tests and the bootstrap can share a
backing store) or created empty and owned by the catalog for its lifetime.

All operations report unmet preconditions through their boolean result;
nothing is raised for a missing, duplicate or unpurchased book.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookstore.domain.models import Book, User

logger = logging.getLogger(__name__)


class BookCatalog:
    """In-memory catalog of books, kept in insertion order.

    Args:
        books: Backing list for the catalog. When omitted a fresh empty list is
            created. The list is used as-is (not copied), so mutations made
            through the catalog are visible to whoever supplied it.
    """

    def __init__(self, books: list[Book] | None = None) -> None:
        self._books: list[Book] = books if books is not None else []

    @property
    def books(self) -> tuple[Book, ...]:
        """Snapshot of the catalog in insertion order."""
        return tuple(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book: object) -> bool:
        return book in self._books

    def add_book(self, book: Book | None) -> bool:
        """Add a book to the catalog.

        Args:
            book: The book to add.

        Returns:
            False if a structurally-equal book is already listed, True otherwise.

        Note:
            `None` is accepted as a no-op and reported as a success; the
            catalog is left unchanged.
        """
        if book is None:
            logger.warning("add_book called with None; nothing added")
            return True
        if book in self._books:
            logger.debug("Rejected duplicate book %r", book.title)
            return False
        self._books.append(book)
        logger.info("Added book %r by %s", book.title, book.author)
        return True

    def remove_book(self, book: Book | None) -> bool:
        """Remove the first structurally-equal book from the catalog.

        Returns:
            True if a book was removed, False if `book` is None or not listed.
        """
        if book is None or book not in self._books:
            return False
        self._books.remove(book)
        logger.info("Removed book %r by %s", book.title, book.author)
        return True

    def search_book(self, keyword: str) -> list[Book]:
        """Return books whose title or author contains `keyword`.

        Matching is a case-sensitive substring test, so an empty keyword
        matches every book. Results follow catalog order.
        """
        matches = [
            book
            for book in self._books
            if keyword in book.title or keyword in book.author
        ]
        logger.debug("Search for %r matched %d book(s)", keyword, len(matches))
        return matches

    def purchase_book(self, user: User, book: Book | None) -> bool:
        """Record that `user` bought `book`.

        The user directory is not consulted; the purchase is appended straight
        onto the given user's `purchased_books`.

        Returns:
            True if the book is listed and the purchase was recorded.
        """
        if book is None or book not in self._books:
            logger.debug("Rejected purchase of unlisted book by %s", user.username)
            return False
        user.purchased_books.append(book)
        logger.info("User %s purchased %r", user.username, book.title)
        return True

    def add_book_review(self, user: User, book: Book, review: str | None) -> bool:
        """Append `review` to `book` if `user` has purchased it.

        The review text is not validated; a `None` review is appended like any
        other value.

        Returns:
            True if the review was appended, False if the user never bought
            the book.
        """
        if not user.has_purchased(book):
            logger.debug(
                "Rejected review of %r by %s: not purchased",
                getattr(book, "title", None),
                user.username,
            )
            return False
        book.reviews.append(review)
        logger.info("User %s reviewed %r", user.username, book.title)
        return True
