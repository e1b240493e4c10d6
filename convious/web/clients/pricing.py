"""Defines the client for requesting real-time prices."""

from convious.web.clients.base import BaseClient
from convious.web.models import PricingRequest, PricingResponse

PRICING_API_VERSION = "1.0.0"


class PricingClient(BaseClient):
    async def get_prices(self, request: PricingRequest) -> PricingResponse:
        response = await self._request(
            "POST",
            self.pricing_url("/api/price/rtp"),
            data=request,
            headers={
                "Accept": "application/json",
                "Accept-Version": PRICING_API_VERSION,
            },
        )
        return PricingResponse.model_validate(response.json())
