"""Bootstrap the catalog and user directory, optionally from a seed file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bookstore import config
from bookstore.adapters.seed import Seed, load_seed
from bookstore.service_layer import BookCatalog, UserDirectory

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application services."""

    catalog: BookCatalog
    directory: UserDirectory


def populate(seed: Seed, catalog: BookCatalog, directory: UserDirectory) -> None:
    """Add the seed's records through the public service operations.

    Duplicates are skipped with a warning rather than treated as errors.
    """
    for book in seed.books:
        if not catalog.add_book(book):
            logger.warning("Skipping duplicate seed book %r", book.title)
    for user in seed.users:
        if not directory.register_user(user):
            logger.warning("Skipping duplicate seed user %r", user.username)


def bootstrap(seed_path: Path | None = None) -> AppContainer:
    """Build the application services.

    Args:
        seed_path: Seed file to pre-populate from. Falls back to
            `BOOKSTORE_SEED_PATH`; when neither is set the services start empty.

    Raises:
        SeedError: If the seed file cannot be read or is malformed.
    """
    catalog = BookCatalog()
    directory = UserDirectory()

    if seed_path is None:
        seed_path = config.get_seed_path_or_none()
    if seed_path is not None:
        populate(load_seed(seed_path), catalog, directory)
    logger.debug(
        "Bootstrapped catalog with %d book(s) and directory with %d user(s)",
        len(catalog),
        len(directory),
    )

    return AppContainer(catalog=catalog, directory=directory)
