"""Defines a unified client for the Convious pricing and inventory APIs."""

import logging

from convious.conf import ApiSettings
from convious.web.auth import AuthenticatedTransport, CredentialProvider
from convious.web.clients.base import BaseClient
from convious.web.clients.inventory import InventoryClient
from convious.web.clients.pricing import PricingClient
from convious.web.transport import HttpxTransport, Transport
from convious.web.utils import get_api_settings

logger = logging.getLogger(__name__)


class PricingApiClient(
    PricingClient,
    InventoryClient,
    BaseClient,
):
    pass


def create_client(
    client_id: str | None = None,
    client_secret: str | None = None,
    *,
    auth_endpoint: str | None = None,
    inventory_endpoint: str | None = None,
    pricing_endpoint: str | None = None,
    timeout: float | None = None,
    transport: Transport | None = None,
) -> PricingApiClient:
    """Builds a client that authenticates every request with client credentials.

    Arguments left as ``None`` fall back to the loaded settings, which read
    the credentials from ``CONVIOUS_CLIENT_ID`` and ``CONVIOUS_CLIENT_SECRET``.

    Args:
        client_id: The OAuth client ID.
        client_secret: The OAuth client secret.
        auth_endpoint: Root URL of the identity service.
        inventory_endpoint: Root URL of the inventory service.
        pricing_endpoint: Root URL of the pricing service.
        timeout: Request timeout in seconds for the default transport.
        transport: The raw transport to send requests with. Defaults to a
            new ``HttpxTransport``.

    Returns:
        The assembled client.
    """
    overrides = {
        "auth_endpoint": auth_endpoint,
        "inventory_endpoint": inventory_endpoint,
        "pricing_endpoint": pricing_endpoint,
        "timeout": timeout,
        "client_id": client_id,
        "client_secret": client_secret,
    }
    if any(value is None for value in overrides.values()):
        defaults = get_api_settings()
        overrides = {key: getattr(defaults, key) if value is None else value for key, value in overrides.items()}
    settings = ApiSettings(**overrides)
    if not settings.client_id or not settings.client_secret:
        raise ValueError(
            "Client credentials are not set! Pass them explicitly or set CONVIOUS_CLIENT_ID and CONVIOUS_CLIENT_SECRET"
        )

    raw = HttpxTransport(timeout=settings.timeout) if transport is None else transport
    provider = CredentialProvider(raw, settings.auth_endpoint, settings.client_id, settings.client_secret)
    logger.debug("Created client for %s against %s", settings.client_id, settings.pricing_endpoint)
    return PricingApiClient(AuthenticatedTransport(raw, provider), settings)
