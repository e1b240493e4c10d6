"""Defines the common interface for the Convious pricing and inventory API."""

__version__ = "0.1.0"

from convious.web.clients.client import PricingApiClient, create_client
