# uniplex/manage/core/client.py
"""
Thin async client for the Uniplex dashboard REST API.

Every call is a single request: no retries, no caching. Non-2xx
responses are turned into ``ApiError`` with the most specific message
the response body offers.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from uniplex.manage.contracts.operation import HttpMethod, TranslatedRequest
from uniplex.manage.core.errors import ApiError, TransportError
from uniplex.manage.core.translate import stringify

logger = logging.getLogger(__name__)


def build_query(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Query pairs in caller order, dropping unsupplied values."""
    if not params:
        return []
    return [(k, stringify(v)) for k, v in params.items() if v is not None]


def error_message(response: httpx.Response) -> str:
    """Extract a human-readable message from an error response."""
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return f"API error: {response.status_code} {response.reason_phrase}".rstrip()

    if isinstance(payload, dict):
        message = payload.get("message") or payload.get("error")
        if message:
            return str(message)
    return f"API error: {response.status_code}"


class ApiClient:
    """HTTP client for the management API.

    Contract::

        {METHOD} {base_url}{path}[?query]
        Authorization: Bearer {api_key}
        Content-Type: application/json
        body: JSON (writes only)
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: HttpMethod,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        url = f"{self._base}{path}"
        content = json.dumps(body) if body is not None else None
        pairs = build_query(params)

        logger.debug("%s %s params=%s", method, path, pairs)
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                resp = await client.request(
                    method,
                    url,
                    params=pairs or None,
                    content=content,
                    headers=self._headers(),
                )
            except httpx.HTTPError as exc:
                logger.warning("Request failed %s %s: %s", method, path, exc)
                raise TransportError(f"Request to {path} failed: {exc}") from exc

        if not resp.is_success:
            message = error_message(resp)
            logger.warning(
                "Request failed status=%s %s %s: %s",
                resp.status_code,
                method,
                path,
                message,
            )
            raise ApiError(message, status_code=resp.status_code)

        if resp.status_code == 204:
            return {}

        try:
            return resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Non-JSON response status=%s %s %s", resp.status_code, method, path)
            raise ApiError(
                f"API error: {resp.status_code} invalid JSON response",
                status_code=resp.status_code,
            ) from exc

    async def send(self, request: TranslatedRequest) -> Any:
        return await self.request(
            request.method, request.path, params=request.query, body=request.body
        )

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body=body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
