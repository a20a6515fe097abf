#!/usr/bin/env python3
"""
Main CLI entry point for the projectdesk server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from projectdesk import __version__
from projectdesk.config import settings
from projectdesk.database import Database
from projectdesk.logging import configure_logging, get_logger

logger = get_logger(__name__)

DATABASE_URL_OPTION = click.option(
    "--database-url",
    envvar="PROJECTDESK_DATABASE_URL",
    default=settings.database_url,
    show_default=False,
    help="Database URL (default: PROJECTDESK_DATABASE_URL or configured value)",
)


@click.group()
@click.version_option(version=__version__, prog_name="projectdesk")
def cli() -> None:
    """projectdesk CLI - run the API server and manage its database."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the projectdesk API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info("Starting projectdesk API server", host=host, port=port, reload=reload)

    # The factory re-reads settings in the server process, so pass choices via env
    os.environ["PROJECTDESK_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["PROJECTDESK_DEBUG"] = "true"

    try:
        uvicorn.run(
            "projectdesk.api.app:get_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@DATABASE_URL_OPTION
def init_db(database_url: str) -> None:
    """Create any missing tables directly from the ORM models."""
    configure_logging(debug=settings.debug, log_level=settings.log_level)

    async def do_init():
        db = Database(database_url, echo=settings.sql_echo)
        try:
            await db.create_tables()
        finally:
            await db.dispose()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create tables", error=str(e))
        click.echo(f"✗ Error creating tables: {e}", err=True)
        sys.exit(1)
    click.echo("✓ Database tables created")


@cli.command()
@DATABASE_URL_OPTION
def seed(database_url: str) -> None:
    """Insert a demo client and project (idempotent)."""
    from projectdesk.database.seed_data import ensure_demo_data

    configure_logging(debug=settings.debug, log_level=settings.log_level)

    async def do_seed():
        db = Database(database_url, echo=settings.sql_echo)
        try:
            async with db.session() as session:
                client = await ensure_demo_data(session)
                return client.id, client.name
        finally:
            await db.dispose()

    try:
        client_id, client_name = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed demo data", error=str(e))
        click.echo(f"✗ Error seeding data: {e}", err=True)
        sys.exit(1)
    click.echo(f"✓ Demo client ready: {client_name} ({client_id})")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
