"""Command-line interface for authcore.

Operator tooling for preparing the user store and inspecting credentials.
"""

import asyncio
import json

import click
from pydantic import ValidationError as PydanticValidationError

from authcore import __version__
from authcore.core.config import Settings, get_settings
from authcore.core.logging import configure_logging
from authcore.domain.entities.user import PublicUser
from authcore.domain.exceptions import InvalidTokenError
from authcore.infrastructure.auth.password_hasher import PasswordHasher
from authcore.infrastructure.auth.token_codec import TokenCodec
from authcore.infrastructure.persistence.database import DatabaseManager


def load_settings() -> Settings:
    """Load settings, reporting invalid configuration without values."""
    try:
        settings = get_settings()
    except PydanticValidationError as e:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in e.errors()})
        raise click.ClickException(f"Invalid configuration: {', '.join(fields)}") from e
    configure_logging(settings)
    return settings


@click.group()
@click.version_option(version=__version__, prog_name="authcore")
def cli() -> None:
    """authcore - credential and token service."""


@cli.command()
def init_db() -> None:
    """Create the users table in the configured database."""
    settings = load_settings()
    db = DatabaseManager(settings)

    async def _init() -> None:
        try:
            await db.create_tables()
        finally:
            await db.disconnect()

    asyncio.run(_init())
    click.echo("Database initialized.")


@cli.command()
@click.password_option("--password", prompt="Password", help="Password to hash")
def hash_password(password: str) -> None:
    """Hash a password with the configured cost factor."""
    settings = load_settings()
    click.echo(PasswordHasher.from_settings(settings).hash(password))


@cli.command()
@click.argument("token")
def verify_token(token: str) -> None:
    """Verify TOKEN and print its public claims."""
    settings = load_settings()
    codec = TokenCodec.from_settings(settings)
    try:
        user = PublicUser.from_claims(codec.verify(token))
    except (InvalidTokenError, ValueError):
        click.echo("Invalid token", err=True)
        raise SystemExit(1)
    click.echo(json.dumps(user.to_claims(), indent=2))


def main() -> None:
    """Entry point for the authcore CLI."""
    cli()


if __name__ == "__main__":
    main()
