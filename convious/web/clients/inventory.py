"""Defines the client for publishing events to the inventory service."""

from typing import Sequence

from convious.web.clients.base import BaseClient
from convious.web.models import InventoryEvent

INVENTORY_API_VERSION = "1.0.0"


class InventoryClient(BaseClient):
    async def post_events(self, events: Sequence[InventoryEvent]) -> None:
        await self._request(
            "POST",
            self.inventory_url("/events"),
            data=events,
            headers={"Accept-Version": INVENTORY_API_VERSION},
        )

    async def post_event(self, event: InventoryEvent) -> None:
        await self.post_events([event])
