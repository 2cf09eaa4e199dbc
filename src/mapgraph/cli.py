#!/usr/bin/env python3
"""
Main CLI entry point for the Mapgraph API server.
"""

import os
import sys
from pathlib import Path

import click
import uvicorn
from alembic import command
from alembic.config import Config

from mapgraph import __version__
from mapgraph.config import settings
from mapgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


def get_alembic_config() -> Config:
    """Get Alembic configuration from the project root."""
    project_dir = Path(__file__).resolve().parents[2]
    alembic_ini = project_dir / "alembic.ini"

    if not alembic_ini.exists():
        raise FileNotFoundError(f"alembic.ini not found at {alembic_ini}")

    return Config(str(alembic_ini))


@click.group()
@click.version_option(version=__version__, prog_name="mapgraph")
def cli() -> None:
    """Mapgraph CLI - run the server and manage the database."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=8000,
    type=int,
    help="Port to bind to (default: 8000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Mapgraph API server."""

    configure_logging(debug=(log_level == "debug"), level=log_level)

    if workers > 1:
        # Subscribers only see events published by their own worker
        logger.warning("Multiple workers with the memory broadcast do not share events")

    logger.info(
        "Starting Mapgraph API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Set environment variables so the app imports with the same settings
    if log_level == "debug":
        os.environ["MAPGRAPH_DEBUG"] = "true"
        os.environ["MAPGRAPH_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("MAPGRAPH_DEBUG", "false")
        os.environ.setdefault("MAPGRAPH_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "mapgraph.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from mapgraph.api.app import app

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.group()
def db() -> None:
    """Manage the database schema and sample data."""
    configure_logging(level=settings.log_level)


@db.command()
@click.argument("revision", default="head")
def upgrade(revision: str) -> None:
    """Upgrade database to a revision (default: head)."""
    try:
        config = get_alembic_config()
        logger.info("Upgrading database", revision=revision)
        command.upgrade(config, revision)
        logger.info("Database upgrade completed successfully")
    except Exception as e:
        logger.error("Database upgrade failed", error=str(e))
        sys.exit(1)


@db.command()
@click.argument("revision", default="-1")
def downgrade(revision: str) -> None:
    """Downgrade database to a revision (default: -1)."""
    try:
        config = get_alembic_config()
        logger.info("Downgrading database", revision=revision)
        command.downgrade(config, revision)
        logger.info("Database downgrade completed successfully")
    except Exception as e:
        logger.error("Database downgrade failed", error=str(e))
        sys.exit(1)


@db.command()
def seed() -> None:
    """Seed the database with a sample user, map, places and route."""
    import asyncio

    from mapgraph.database.connection import dispose_database, get_async_session
    from mapgraph.database.seed_data import seed_sample_data

    async def do_seed():
        try:
            async with get_async_session() as session:
                user_id = await seed_sample_data(session)
            click.echo(f"✓ Database seeded (sample user {user_id})")
        except Exception as e:
            logger.error("Failed to seed database", error=str(e))
            click.echo(f"✗ Error seeding database: {e}", err=True)
            sys.exit(1)
        finally:
            await dispose_database()

    asyncio.run(do_seed())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
