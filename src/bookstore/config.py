"""Configuration utilities for the bookstore.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from pathlib import Path

SEED_PATH_ENV = "BOOKSTORE_SEED_PATH"  # pragma: no mutate


class SeedPathNotSetError(Exception):
    """Raised when the BOOKSTORE_SEED_PATH environment variable is not set."""


def get_seed_path() -> Path:
    """Get the seed file path from the environment.

    Returns:
        The value of the `BOOKSTORE_SEED_PATH` environment variable as a `Path`.

    Raises:
        SeedPathNotSetError: If `BOOKSTORE_SEED_PATH` is not set or empty.
    """
    if not (path := os.environ.get(SEED_PATH_ENV)):
        raise SeedPathNotSetError
    return Path(path)


def get_seed_path_or_none() -> Path | None:
    """Return the configured seed path, or None if none is configured."""
    try:
        return get_seed_path()
    except SeedPathNotSetError:
        return None
