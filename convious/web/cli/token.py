"""Defines the CLI for obtaining an access token from the identity service."""

import logging
import sys

import click

from convious.errors import ConviousError
from convious.utils.cli import coro
from convious.web.auth import CredentialProvider
from convious.web.transport import HttpxTransport
from convious.web.utils import get_api_settings

logger = logging.getLogger(__name__)


@click.group()
def cli() -> None:
    """Retrieve an access token using the configured client credentials."""
    pass


@cli.command()
@coro
async def get() -> None:
    """Exchange the client credentials for a bearer token."""
    settings = get_api_settings()
    if not settings.client_id or not settings.client_secret:
        raise click.UsageError("Set CONVIOUS_CLIENT_ID and CONVIOUS_CLIENT_SECRET first")

    transport = HttpxTransport(timeout=settings.timeout)
    provider = CredentialProvider(transport, settings.auth_endpoint, settings.client_id, settings.client_secret)
    try:
        token = await provider.exchange()
    except ConviousError as e:
        logger.error("Error getting access token: %s", e)
        sys.exit(1)
    finally:
        await transport.close()
    click.echo(token)


if __name__ == "__main__":
    cli()
