"""Defines the raw HTTP transport used by the Convious clients.

A transport sends one request and hands back whatever the server answered.
It applies no authentication and never retries; those policies live in the
layers that wrap it (see :mod:`convious.web.auth`).
"""

import logging
from typing import Mapping, Protocol

import httpx

from convious.errors import TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    async def request(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> httpx.Response: ...

    async def close(self) -> None: ...


class HttpxTransport:
    """Sends requests through a lazily created ``httpx.AsyncClient``.

    Args:
        timeout: Per-request timeout in seconds.
        client: An existing client to use instead of creating one. The
            transport takes ownership of it and closes it in ``close``.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None) -> None:
        self.timeout = timeout
        self._client = client

    def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
        return self._client

    async def request(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> httpx.Response:
        client = self.get_client()
        logger.debug("%s %s", method, url)
        try:
            response = await client.request(method, url, headers=dict(headers or {}), content=body)
        except httpx.TransportError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
