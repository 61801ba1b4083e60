"""Command-line interface for Storefront.

This module provides the CLI commands for running the server and for the
small maintenance helpers (mock catalog, password hashes).
"""

import json
import sys
from typing import NoReturn

import click

from storefront.core.config import get_settings
from storefront.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="Storefront")
def cli() -> None:
    """Storefront - e-commerce backend helpers.

    Settings are loaded from STOREFRONT_* environment variables and .env.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the Storefront server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Storefront server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "storefront.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("mock-products")
@click.option("--count", type=click.IntRange(min=0), default=None, help="Number of products")
@click.option("--indent", type=int, default=2, show_default=True, help="JSON indentation")
def mock_products(count: int | None, indent: int) -> None:
    """Print fake products as JSON."""
    from storefront.domain.services import generate_products

    if count is None:
        count = get_settings().mock_products_count
    click.echo(json.dumps(generate_products(count), ensure_ascii=False, indent=indent))


@cli.command("hash-password")
@click.argument("password", required=False)
def hash_password_command(password: str | None) -> None:
    """Print the stored-hash form of PASSWORD.

    Prompts for the password when it is not given on the command line.
    """
    from storefront.infrastructure.auth import hash_password

    if password is None:
        password = click.prompt("Password", hide_input=True, confirmation_prompt=True)
    click.echo(hash_password(password))


@cli.command()
def info() -> None:
    """Display Storefront configuration."""
    settings = get_settings()

    click.echo(f"""
Storefront v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}

Security:
  Token Expire: {settings.token_expire_minutes} minutes
  Auth Cookie:  {settings.auth_cookie_name}

Uploads:
  Directory:    {settings.upload_dir}

Email:
  SMTP:         {settings.smtp_host}:{settings.smtp_port}
  Sender:       {settings.email_from_name} <{settings.email}>

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Entry point for the ``storefront`` command and ``python -m storefront``."""
    cli()


if __name__ == "__main__":
    main()
