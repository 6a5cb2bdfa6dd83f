#!/usr/bin/env python3
"""
Command line entry point for the SocialMedia API.
"""

import asyncio
import sys

import click
import uvicorn

from socialmedia import __version__
from socialmedia.config import settings
from socialmedia.errors import ConfigurationMissingError
from socialmedia.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="socialmedia")
def cli() -> None:
    """SocialMedia CLI - run the GraphQL server and check the document store."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the GraphQL server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    try:
        from socialmedia.config import get_mongo_url

        get_mongo_url()
    except ConfigurationMissingError as e:
        logger.error("Cannot start server", error=str(e))
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    logger.info("Starting SocialMedia API server", host=host, port=port, reload=reload)

    try:
        uvicorn.run(
            "socialmedia.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")


@cli.command()
@click.option("--url", default=None, help="Connection string (defaults to configured URL)")
def ping(url: str | None) -> None:
    """Check that the document store is reachable."""
    from socialmedia.database.connection import close_store, connect_store, ping_store

    configure_logging()

    async def do_ping() -> tuple[bool, str | None]:
        store = connect_store(url=url)
        try:
            return await ping_store(store)
        finally:
            close_store(store)

    try:
        ok, error = asyncio.run(do_ping())
    except ConfigurationMissingError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    if not ok:
        click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    click.echo(f"✓ Document store reachable (database: {settings.database_name})")


if __name__ == "__main__":
    cli()
