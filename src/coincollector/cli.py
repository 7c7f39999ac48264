"""Command-line interface for CoinCollector.

This module provides the CLI commands for running and managing
the CoinCollector application.
"""

import asyncio
from typing import NoReturn

import click

from coincollector.core.config import get_settings
from coincollector.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="CoinCollector")
def cli() -> None:
    """CoinCollector - euro coin collection management.

    Settings are read from COINCOLLECTOR_* environment variables.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the CoinCollector server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if bind_workers > 1 and settings.is_sqlite:
        click.echo("Error: SQLite does not support multiple worker processes.", err=True)
        raise SystemExit(1)

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting CoinCollector server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "coincollector.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("init-db")
def init_db() -> None:
    """Create all database tables that do not exist yet."""
    from coincollector.infrastructure.persistence.database import get_db_manager, init_database

    configure_logging(get_settings())

    async def initialize():
        try:
            await init_database()
            click.echo("Database initialized successfully.")
        finally:
            await get_db_manager().disconnect()

    asyncio.run(initialize())


@cli.command("create-user")
@click.argument("username")
def create_user(username: str) -> None:
    """Register a user and print its id."""
    from coincollector.domain.entities import User
    from coincollector.domain.exceptions import StorageError
    from coincollector.domain.services import UserStorageService
    from coincollector.infrastructure.persistence.database import get_db_manager, init_database

    configure_logging(get_settings())

    async def create():
        try:
            await init_database()
            service = UserStorageService(get_db_manager().session_factory)
            user = await service.save(User.create(username))
            click.echo(user.id)
        except StorageError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
        finally:
            await get_db_manager().disconnect()

    asyncio.run(create())


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `coincollector` command is run
    or when using `python -m coincollector`.
    """
    cli()


if __name__ == "__main__":
    main()
