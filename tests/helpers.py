"""Fake transports and credential providers used across the tests."""

import asyncio
from typing import Callable, Mapping

import httpx

from convious.web.transport import HttpxTransport

Outcome = httpx.Response | Exception


def mock_transport(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxTransport:
    return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


class FakeProvider:
    """Hands out the given tokens (or raises the given errors) in order."""

    def __init__(self, *results: str | Exception) -> None:
        self.results = list(results)
        self.calls = 0

    async def exchange(self) -> str:
        self.calls += 1
        await asyncio.sleep(0)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class FakeTransport:
    """Answers by (url, bearer token).

    A route may hold a list of outcomes, which are consumed in order; the last
    one is repeated.
    """

    def __init__(self, routes: Mapping[tuple[str, str], Outcome | list[Outcome]]) -> None:
        self.routes = {key: value if isinstance(value, list) else [value] for key, value in routes.items()}
        self.requests: list[tuple[str, str, dict[str, str], str | bytes | None]] = []
        self.closed = False

    async def request(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> httpx.Response:
        sent = dict(headers or {})
        self.requests.append((url, method, sent, body))
        await asyncio.sleep(0)
        token = sent["Authorization"].removeprefix("Bearer ")
        outcomes = self.routes[(url, token)]
        outcome = outcomes.pop(0) if len(outcomes) > 1 else outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True

    def tokens_sent(self) -> list[str]:
        return [headers["Authorization"] for _, _, headers, _ in self.requests]
