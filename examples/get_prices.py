"""Shows an example of requesting prices from the Convious pricing API."""

import asyncio
import logging
from datetime import datetime, timedelta

import colorlogging

from convious import create_client
from convious.web.models import PricingRequest, PricingRequestProduct

logger = logging.getLogger(__name__)


async def main() -> None:
    colorlogging.configure()

    today = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    request = PricingRequest(
        cookie_id="example",
        date_from=today,
        date_to=today + timedelta(days=7),
        timezone="Europe/Amsterdam",
        products=[PricingRequestProduct(product_reference="adult", number_of_items=1)],
    )

    async with create_client() as client:
        response = await client.get_prices(request)

    for item in response.prices:
        for product in item.products:
            logger.info("%s %s: %s", item.price_date, product.product_reference, product.price)


if __name__ == "__main__":
    # python -m examples.get_prices
    asyncio.run(main())
