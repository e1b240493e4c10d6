"""Defines the top-level Convious CLI."""

import logging

import click
import colorlogging

from convious.utils.cli import recursive_help
from convious.web.cli.events import cli as events_cli
from convious.web.cli.prices import cli as prices_cli
from convious.web.cli.token import cli as token_cli


@click.group()
def cli() -> None:
    """Command line interface for the Convious pricing and inventory APIs."""
    colorlogging.configure()

    logging.getLogger("httpx").setLevel(logging.WARNING)


cli.add_command(token_cli, "token")
cli.add_command(prices_cli, "prices")
cli.add_command(events_cli, "events")

if __name__ == "__main__":
    # python -m convious.cli
    print(recursive_help(cli))
