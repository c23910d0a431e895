"""Bookstore ``books`` commands: list and search the catalog.

Matching books are printed to **stdout**, one per line, in catalog order, so
the output can be piped. Notices (e.g. "no match") go to **stderr**.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from .helpers import get_app, warn

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bookstore.domain.models import Book


def format_book(book: Book) -> str:
    """Render a book as ``TITLE by AUTHOR [GENRE] $PRICE``."""
    return f"{book.title} by {book.author} [{book.genre}] ${book.price}"


def _echo_books(books: Iterable[Book]) -> None:
    for book in books:
        click.echo(format_book(book))


@click.group()
def books() -> None:
    """Catalog commands."""


@books.command(name="list")
@click.pass_context
def list_books(ctx: click.Context) -> None:
    """List every book in the catalog."""
    catalog = get_app(ctx).catalog
    if not catalog:
        warn("The catalog is empty.")
        return
    _echo_books(catalog.books)


@books.command()
@click.argument("keyword")
@click.pass_context
def search(ctx: click.Context, keyword: str) -> None:
    """Search titles and authors for KEYWORD (case-sensitive)."""
    matches = get_app(ctx).catalog.search_book(keyword)
    if not matches:
        warn(f"No books match {keyword!r}.")
        return
    _echo_books(matches)
