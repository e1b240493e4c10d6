"""Defines the CLI for requesting prices."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from tabulate import tabulate

from convious.errors import ConviousError
from convious.utils.cli import coro, read_json
from convious.web.clients.client import create_client
from convious.web.models import PricingRequest

logger = logging.getLogger(__name__)


@click.group()
def cli() -> None:
    """Get real-time prices from the pricing service."""
    pass


@cli.command()
@click.argument("request_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@coro
async def get(request_file: Path) -> None:
    """Request prices for the pricing request stored in REQUEST_FILE."""
    try:
        request = PricingRequest.model_validate(read_json(request_file))
    except ValidationError as e:
        logger.error("Invalid pricing request in %s: %s", request_file, e)
        sys.exit(1)

    try:
        client = create_client()
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    try:
        async with client:
            response = await client.get_prices(request)
    except ConviousError as e:
        logger.error("%s", e)
        sys.exit(1)

    table_data = [
        [
            click.style(item.price_date, fg="blue"),
            item.price_time or "N/A",
            click.style(product.product_reference, fg="green"),
            product.number_of_items,
            click.style(product.price, fg="yellow"),
        ]
        for item in response.prices
        for product in item.products
    ]
    if table_data:
        table = tabulate(
            table_data,
            headers=["Date", "Time", "Product", "Items", "Price"],
            tablefmt="simple",
            disable_numparse=True,
        )
        click.echo(table)
    else:
        click.echo(click.style("No prices returned", fg="red"))


if __name__ == "__main__":
    cli()
