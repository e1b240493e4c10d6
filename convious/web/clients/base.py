"""Defines a base client for the Convious pricing and inventory APIs."""

import json
import logging
from types import TracebackType
from typing import Any, Mapping, Self, Sequence, Type

import httpx
from pydantic import BaseModel

from convious.conf import ApiSettings
from convious.errors import ApiError
from convious.web.transport import Transport
from convious.web.utils import endpoint_url, get_api_settings

logger = logging.getLogger(__name__)

JsonBody = BaseModel | Sequence[BaseModel] | Mapping[str, Any]


def encode_json(data: JsonBody) -> str:
    if isinstance(data, BaseModel):
        return data.model_dump_json(by_alias=True)
    if isinstance(data, Mapping):
        return json.dumps(data)
    return json.dumps([item.model_dump(mode="json", by_alias=True) for item in data])


class BaseClient:
    def __init__(self, http: Transport, settings: ApiSettings | None = None) -> None:
        self.http = http
        self.settings = get_api_settings() if settings is None else settings

    def inventory_url(self, path: str) -> str:
        return endpoint_url(self.settings.inventory_endpoint, path)

    def pricing_url(self, path: str) -> str:
        return endpoint_url(self.settings.pricing_endpoint, path)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        data: JsonBody | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        request_headers = dict(headers or {})
        body: str | None = None
        if data is not None:
            body = encode_json(data)
            request_headers.setdefault("Content-Type", "application/json")

        response = await self.http.request(url, method=method, headers=request_headers, body=body)

        if not response.is_success:
            logger.error("Got error %d from %s", response.status_code, url)
            try:
                error_json = response.json()
            except ValueError:
                error_json = response.text
            if isinstance(error_json, Mapping):
                for key, value in error_json.items():
                    logger.error("  [%s] %s", key, value)
            elif error_json:
                logger.error("  %s", error_json)
            raise ApiError(url, response.status_code, response.text)

        return response

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
