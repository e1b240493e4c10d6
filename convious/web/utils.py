"""Utility functions for interacting with the Convious services."""

import functools

from convious.conf import ApiSettings, Settings


@functools.lru_cache
def get_api_settings() -> ApiSettings:
    """Returns the API section of the loaded settings."""
    return Settings.load().api


def endpoint_url(base: str, path: str) -> str:
    """Joins a service root and a path, tolerating a trailing slash on the root."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"
