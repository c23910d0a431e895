"""JSON seed loader.

A seed is a read-only JSON document used to pre-populate the catalog and the
user directory, e.g. for the CLI:

```json
{
  "books": [
    {"title": "Dune", "author": "Herbert", "genre": "Sci-Fi", "price": "9.99"}
  ],
  "users": [
    {"username": "alice", "password": "s3cret", "email": "alice@example.com"}
  ]
}
```

Both top-level keys are optional. Book records may also carry a `reviews`
list. Nothing is ever written back to the seed.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from bookstore.domain.errors import InvalidBookError
from bookstore.domain.models import Book, User

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

BOOK_FIELDS = ("title", "author", "genre", "price")
BOOK_TEXT_FIELDS = ("title", "author", "genre")
USER_FIELDS = ("username", "password", "email")


class SeedError(Exception):
    """Base class for seed loading errors."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class SeedFileError(SeedError):
    """Raised when the seed file cannot be read."""


class InvalidSeedError(SeedError):
    """Raised when the seed document is malformed."""


@dataclass(frozen=True, slots=True)
class Seed:
    """Records parsed from a seed document."""

    books: tuple[Book, ...] = ()
    users: tuple[User, ...] = ()


def _records(path: Path, document: dict[str, Any], key: str) -> list[dict[str, Any]]:
    records = document.get(key, [])
    if not isinstance(records, list):
        raise InvalidSeedError(path, f"'{key}' must be a list")
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise InvalidSeedError(path, f"{key}[{index}] must be an object")
    return records


def _require(path: Path, key: str, index: int, record: dict, fields: tuple[str, ...]):
    if missing := [name for name in fields if name not in record]:
        raise InvalidSeedError(
            path, f"{key}[{index}] is missing field(s): {', '.join(missing)}"
        )


def _require_text(
    path: Path, key: str, index: int, record: dict, fields: tuple[str, ...]
):
    for name in fields:
        if not isinstance(record[name], str):
            raise InvalidSeedError(path, f"{key}[{index}].{name} must be a string")


def _parse_book(path: Path, index: int, record: dict[str, Any]) -> Book:
    _require(path, "books", index, record, BOOK_FIELDS)
    _require_text(path, "books", index, record, BOOK_TEXT_FIELDS)
    reviews = record.get("reviews", [])
    if not isinstance(reviews, list):
        raise InvalidSeedError(path, f"books[{index}].reviews must be a list")
    for n, review in enumerate(reviews):
        # null reviews are allowed, same as Book.reviews
        if review is not None and not isinstance(review, str):
            raise InvalidSeedError(
                path, f"books[{index}].reviews[{n}] must be a string or null"
            )
    try:
        return Book(
            title=record["title"],
            author=record["author"],
            genre=record["genre"],
            price=record["price"],
            reviews=list(reviews),
        )
    except InvalidBookError as e:
        raise InvalidSeedError(path, f"books[{index}]: {e}") from e


def _parse_user(path: Path, index: int, record: dict[str, Any]) -> User:
    _require(path, "users", index, record, USER_FIELDS)
    _require_text(path, "users", index, record, USER_FIELDS)
    return User(
        username=record["username"],
        password=record["password"],
        email=record["email"],
    )


def load_seed(path: Path) -> Seed:
    """Load a seed document from `path`.

    Args:
        path: Location of the JSON seed file.

    Returns:
        The parsed books and users, in document order.

    Raises:
        SeedFileError: If the file cannot be read.
        InvalidSeedError: If the document is not valid JSON or a record is malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedFileError(path, f"cannot read seed file ({e.strerror})") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidSeedError(path, f"invalid JSON: {e.msg}") from e
    if not isinstance(document, dict):
        raise InvalidSeedError(path, "top-level document must be an object")

    books = tuple(
        _parse_book(path, i, r) for i, r in enumerate(_records(path, document, "books"))
    )
    users = tuple(
        _parse_user(path, i, r) for i, r in enumerate(_records(path, document, "users"))
    )
    logger.debug(
        "Loaded seed %s: %d book(s), %d user(s)", path, len(books), len(users)
    )
    return Seed(books=books, users=users)
