#!/usr/bin/env python3
"""
Main CLI entry point for the orderdesk server.
"""

import os
import sys

import click
import uvicorn

from orderdesk import __version__
from orderdesk.config import settings
from orderdesk.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="orderdesk")
def cli() -> None:
    """orderdesk CLI - run the server and inspect the schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the orderdesk API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting orderdesk API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The factory re-reads settings, so pass the level through the environment
    os.environ["ORDERDESK_LOG_LEVEL"] = log_level
    if log_level == "debug":
        os.environ["ORDERDESK_DEBUG"] = "true"

    try:
        uvicorn.run(
            "orderdesk.api.app:build_default_app",
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


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from orderdesk.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
