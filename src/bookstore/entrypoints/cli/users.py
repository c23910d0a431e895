"""Bookstore ``users`` commands."""

from __future__ import annotations

import click

from .helpers import error, get_app, success


@click.group()
def users() -> None:
    """User directory commands."""


@users.command()
@click.argument("username")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    help="Password to check (prompted for when omitted).",
)
@click.pass_context
def login(ctx: click.Context, username: str, password: str) -> None:
    """Check USERNAME's credentials against the user directory.

    Exits with status 1 when the credentials do not match.
    """
    user = get_app(ctx).directory.login_user(username, password)
    if user is None:
        error(f"Invalid credentials for {username!r}.")
        ctx.exit(1)
    success(f"Logged in as {user.username} <{user.email}>.")
