#!/usr/bin/env python3
"""
Main CLI entry point for the profile GraphQL server.
"""

import os
import sys

import click
import uvicorn
from graphql import print_schema

from profilegraph import __version__
from profilegraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="profilegraph")
def cli() -> None:
    """Profile GraphQL CLI - run the server and inspect the schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=8080,
    type=int,
    help="Port to bind to (default: 8080)",
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
    """Start the profile GraphQL API server."""
    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    logger.info(
        "Starting profile GraphQL server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Picked up by the settings object when the app is imported in the server process
    if log_level == "debug":
        os.environ["PROFILEGRAPH_DEBUG"] = "true"
    else:
        os.environ.setdefault("PROFILEGRAPH_DEBUG", "false")
    os.environ["PROFILEGRAPH_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "profilegraph.api.app:create_default_app",
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


@cli.command("print-schema")
def print_schema_command() -> None:
    """Print the GraphQL schema in SDL form."""
    from profilegraph.graphql.errors import SchemaSyntaxError
    from profilegraph.graphql.schema import create_schema

    configure_logging(log_level="warning")

    try:
        schema = create_schema()
    except SchemaSyntaxError as e:
        click.echo(f"✗ Invalid schema: {e}", err=True)
        sys.exit(1)

    click.echo(print_schema(schema))


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
