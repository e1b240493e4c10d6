"""Defines the client-credentials exchange and the authenticated transport.

``AuthenticatedTransport`` wraps any :class:`~convious.web.transport.Transport`
and attaches a bearer token to every request. The token is fetched lazily,
cached until the server rejects it with HTTP 401, and refreshed at most once
per rejected request. Concurrent requests that need a token while one is
being fetched wait on the same exchange instead of starting their own.
"""

import asyncio
import logging
from typing import Mapping, Protocol
from urllib.parse import quote, urlencode

import httpx

from convious.errors import AuthError
from convious.web.transport import Transport
from convious.web.utils import endpoint_url

logger = logging.getLogger(__name__)

TOKEN_PATH = "/oauth/token/"

# Characters that ``encodeURIComponent`` leaves untouched besides alphanumerics and "-_.~".
_FORM_SAFE = "!*'()"


def _consume_exception(task: asyncio.Task[str]) -> None:
    # A failed exchange whose waiters were all cancelled still counts as retrieved.
    if not task.cancelled():
        task.exception()


class CredentialSource(Protocol):
    async def exchange(self) -> str: ...


class CredentialProvider:
    """Exchanges a client ID and secret for a bearer token.

    Every call to ``exchange`` performs exactly one request against the token
    endpoint. Nothing is cached here.
    """

    def __init__(self, transport: Transport, auth_endpoint: str, client_id: str, client_secret: str) -> None:
        self._transport = transport
        self._auth_endpoint = auth_endpoint
        self._client_id = client_id
        self._client_secret = client_secret

    @property
    def token_url(self) -> str:
        return endpoint_url(self._auth_endpoint, TOKEN_PATH)

    def form_body(self) -> str:
        return urlencode(
            {
                "grant_type": "client_credentials",
                "client_id": self._client_id,
                "client_secret": self._client_secret,
            },
            safe=_FORM_SAFE,
            quote_via=quote,
        )

    async def exchange(self) -> str:
        """Requests a new bearer token.

        Returns:
            The ``access_token`` issued by the token endpoint.

        Raises:
            AuthError: If the endpoint answers with a non-2xx status or the
                body does not contain an access token.
            TransportError: If the token endpoint could not be reached.
        """
        logger.info("Requesting a new access token for client %s", self._client_id)
        response = await self._transport.request(
            self.token_url,
            method="POST",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            body=self.form_body(),
        )

        if not response.is_success:
            raise AuthError(response.text, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise AuthError(f"token endpoint returned a non-JSON body: {response.text}", response.status_code) from e

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(token, str) or not token:
            raise AuthError(f"token endpoint response has no access_token: {response.text}", response.status_code)
        return token


class AuthenticatedTransport:
    """Adds ``Authorization: Bearer <token>`` to requests sent through ``transport``.

    Responses are returned as-is, whatever their status. The only status the
    transport reacts to is 401: the cached token is dropped, a new one is
    obtained and the request is sent one more time. If no new token can be
    obtained, the original 401 response is returned.
    """

    def __init__(self, transport: Transport, provider: CredentialSource) -> None:
        self._transport = transport
        self._provider = provider
        self._token: str | None = None
        self._refresh_task: asyncio.Task[str] | None = None

    @property
    def token(self) -> str | None:
        return self._token

    async def _exchange(self) -> str:
        try:
            token = await self._provider.exchange()
        finally:
            self._refresh_task = None
        self._token = token
        return token

    async def _refresh_token(self) -> str:
        # Callers arriving while an exchange is running share its result.
        if self._refresh_task is None:
            self._refresh_task = asyncio.ensure_future(self._exchange())
            self._refresh_task.add_done_callback(_consume_exception)
        return await asyncio.shield(self._refresh_task)

    async def _get_token(self) -> str:
        if self._token is not None:
            return self._token
        return await self._refresh_token()

    def invalidate(self) -> None:
        self._token = None

    async def _send(
        self,
        url: str,
        token: str,
        method: str,
        headers: Mapping[str, str] | None,
        body: str | bytes | None,
    ) -> httpx.Response:
        merged = {key: value for key, value in (headers or {}).items() if key.lower() != "authorization"}
        merged["Authorization"] = f"Bearer {token}"
        return await self._transport.request(url, method=method, headers=merged, body=body)

    async def request(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> httpx.Response:
        token = await self._get_token()
        response = await self._send(url, token, method, headers, body)
        if response.status_code != 401:
            return response

        logger.warning("%s %s was rejected with 401; refreshing the access token", method, url)
        self.invalidate()
        try:
            token = await self._refresh_token()
        except Exception:
            logger.warning("Could not refresh the access token, returning the original response", exc_info=True)
            return response

        return await self._send(url, token, method, headers, body)

    async def close(self) -> None:
        await self._transport.close()
