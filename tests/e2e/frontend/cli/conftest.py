"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits log messages at every
level, fixtures to register it on the top-level group, a CliRunner, an
isolated filesystem per test, and a small seed file.
"""

import json
import logging

import click
import pytest
from click.testing import CliRunner

from bookstore.entrypoints.cli.main import bookstore

# pylint: disable=redefined-outer-name

SEED = {
    "books": [
        {"title": "Dune", "author": "Herbert", "genre": "Sci-Fi", "price": "9.99"},
        {"title": "Foundation", "author": "Asimov", "genre": "Sci-Fi", "price": "8.99"},
        {"title": "Emma", "author": "Austen", "genre": "Classic", "price": "5.50"},
    ],
    "users": [
        {"username": "alice", "password": "s3cret", "email": "alice@example.com"},
    ],
}


@click.command()
def log_demo():
    """Emit one message per level on a bookstore and a third-party logger."""
    logger = logging.getLogger("bookstore.demo")
    logger.debug("demo debug message")
    logger.info("demo info message")
    logger.warning("demo warning message")
    logger.error("demo error message")
    logger.critical("demo critical message")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("thirdparty debug message")
    third_party_logger.info("thirdparty info message")
    third_party_logger.warning("thirdparty warning message")
    logger.debug("demo final debug message")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any click-extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the `bookstore` group for the duration of a test."""
    bookstore.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(bookstore, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated temporary working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def seed_file(fs):
    """Write the sample seed into the isolated filesystem and return its name."""
    path = "seed.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(SEED, f)
    return path
