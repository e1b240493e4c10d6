"""Defines the CLI for publishing inventory events."""

import logging
import sys
from pathlib import Path

import click
from pydantic import TypeAdapter, ValidationError

from convious.errors import ConviousError
from convious.utils.cli import coro, read_json
from convious.web.clients.client import create_client
from convious.web.models import InventoryEvent

logger = logging.getLogger(__name__)

_events_adapter: TypeAdapter[list[InventoryEvent]] = TypeAdapter(list[InventoryEvent])


@click.group()
def cli() -> None:
    """Publish product events to the inventory service."""
    pass


@cli.command()
@click.argument("events_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@coro
async def post(events_file: Path) -> None:
    """Post the event, or list of events, stored in EVENTS_FILE."""
    raw = read_json(events_file)
    try:
        events = _events_adapter.validate_python(raw if isinstance(raw, list) else [raw])
    except ValidationError as e:
        logger.error("Invalid events in %s: %s", events_file, e)
        sys.exit(1)

    try:
        client = create_client()
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    try:
        async with client:
            await client.post_events(events)
    except ConviousError as e:
        logger.error("%s", e)
        sys.exit(1)
    click.echo(f"Posted {click.style(str(len(events)), fg='green')} event(s)")


if __name__ == "__main__":
    cli()
