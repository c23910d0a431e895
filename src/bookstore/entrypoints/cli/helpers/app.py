"""Access to the bootstrapped application from within CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from bookstore.bootstrap import AppContainer, SeedError, bootstrap

SEED_KEY = "seed_path"
APP_KEY = "app"


def get_app(ctx: click.Context) -> AppContainer:
    """Return the application container, bootstrapping it on first use.

    The seed path is taken from the top-level ``--seed`` option stored in
    ``ctx.obj``. The container is cached on the context so nested commands
    share one set of services.

    Raises:
        click.ClickException: If the seed file is missing or malformed.
    """
    obj = ctx.ensure_object(dict)
    if APP_KEY not in obj:
        seed_path: Path | None = obj.get(SEED_KEY)
        try:
            obj[APP_KEY] = bootstrap(seed_path)
        except SeedError as e:
            raise click.ClickException(
                f"Could not load seed data: {e}\n\n"
                "Pass a valid JSON seed with --seed or BOOKSTORE_SEED_PATH."
            ) from e
    return obj[APP_KEY]
