"""Command line entry point for the users service.

Usage:
    python -m users_api                          # Serve on localhost:8080
    python -m users_api --host 0.0.0.0 -p 9000   # Override bind address
    python -m users_api --database-type mock     # Pick the storage backend
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

import typer
import uvicorn
from pydantic import ValidationError

from users_api.domain.errors import InvalidDatabaseTypeError
from users_api.entrypoints.api import create_app
from users_api.services.config import Settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="users-api",
    help="An HTTP Server to manage users.",
    add_completion=False,
)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Hostname"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port"),
    timeout: Optional[float] = typer.Option(None, "--timeout", "-t", help="Server timeout in seconds"),
    database_type: Optional[str] = typer.Option(
        None, "--database-type", help="Database type (supported values: mock)"
    ),
    url_prefix: Optional[str] = typer.Option(None, "--url-prefix", help="Users resource URL prefix"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
) -> None:
    """Serve the users API."""
    overrides: Dict[str, Any] = {
        "USERS_API_HOST": host,
        "USERS_API_PORT": port,
        "USERS_API_TIMEOUT": timeout,
        "USERS_API_DB_TYPE": database_type,
        "USERS_API_URL_PREFIX": url_prefix,
        "USERS_API_LOG_LEVEL": log_level,
    }
    try:
        settings = Settings(**{key: value for key, value in overrides.items() if value is not None})
    except ValidationError as error:
        logger.error(f"invalid settings: {error}")
        raise typer.Exit(1)
    logging.getLogger().setLevel(settings.USERS_API_LOG_LEVEL)

    try:
        api = create_app(settings)
    except InvalidDatabaseTypeError as error:
        logger.error(f"could not create storage: {error}")
        raise typer.Exit(1)

    logger.info(f"Start server: {settings.USERS_API_HOST}:{settings.USERS_API_PORT}")
    uvicorn.run(
        api,
        host=settings.USERS_API_HOST,
        port=settings.USERS_API_PORT,
        timeout_keep_alive=math.ceil(settings.USERS_API_TIMEOUT),
        log_level=settings.USERS_API_LOG_LEVEL.lower(),
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
