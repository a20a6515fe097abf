#!/usr/bin/env python3
"""
projectdesk-migrate: apply and inspect alembic migrations for the clients/projects schema.
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from alembic import command
from alembic.config import Config
from projectdesk import __version__
from projectdesk.cli import DATABASE_URL_OPTION
from projectdesk.logging import configure_logging, get_logger

from .connection import to_async_url

logger = get_logger(__name__)

# alembic.ini and alembic/ live at the project root, next to src/
PROJECT_DIR = Path(__file__).resolve().parents[3]


def build_alembic_config(database_url: str) -> Config:
    """Build an alembic Config pointed at ``database_url``.

    The URL travels through ``Config.attributes`` rather than the ini file so
    credentials containing ``%`` need no escaping.
    """
    alembic_ini = PROJECT_DIR / "alembic.ini"
    if not alembic_ini.exists():
        raise click.ClickException(f"alembic.ini not found at {alembic_ini}")

    # stdout is bound per call so `current`/`history` print where click writes
    config = Config(str(alembic_ini), stdout=sys.stdout)
    config.set_main_option("script_location", str(PROJECT_DIR / "alembic"))
    config.attributes["database_url"] = to_async_url(database_url)
    # Logging is already configured by this CLI; keep alembic.ini from replacing it
    config.attributes["configure_logger"] = False
    return config


def run_migration_command(
    ctx: click.Context, name: str, fn: Callable[..., Any], *args: Any, **kwargs: Any
) -> None:
    config: Config = ctx.obj
    logger.info("Running migration command", command=name, **kwargs)
    try:
        fn(config, *args, **kwargs)
    except Exception as e:
        logger.error("Migration command failed", command=name, error=str(e))
        raise click.ClickException(f"{name} failed: {e}") from e


@click.group()
@DATABASE_URL_OPTION
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.version_option(version=__version__, prog_name="projectdesk-migrate")
@click.pass_context
def main(ctx: click.Context, database_url: str, log_level: str) -> None:
    """Manage the projectdesk database schema."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)
    ctx.obj = build_alembic_config(database_url)


@main.command()
@click.argument("revision", default="head")
@click.pass_context
def upgrade(ctx: click.Context, revision: str) -> None:
    """Upgrade the schema to REVISION (default: head)."""
    run_migration_command(ctx, "upgrade", command.upgrade, revision)
    click.echo(f"✓ Upgraded to {revision}")


@main.command()
@click.argument("revision", default="-1")
@click.pass_context
def downgrade(ctx: click.Context, revision: str) -> None:
    """Downgrade the schema to REVISION (default: one step back)."""
    run_migration_command(ctx, "downgrade", command.downgrade, revision)
    click.echo(f"✓ Downgraded to {revision}")


@main.command()
@click.pass_context
def current(ctx: click.Context) -> None:
    """Print the revision the database is at."""
    run_migration_command(ctx, "current", command.current)


@main.command()
@click.pass_context
def history(ctx: click.Context) -> None:
    """List known revisions."""
    run_migration_command(ctx, "history", command.history)


if __name__ == "__main__":
    main()
