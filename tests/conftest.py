# tests/conftest.py
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import httpx
import pytest

from uniplex.manage.core.client import ApiClient

BASE_URL = "https://uniplex.ai"
API_KEY = "uni_test_xxx"

_UNSET = object()


@dataclass
class CapturedRequest:
    method: str
    url: str
    path: str
    params: dict[str, str]
    headers: httpx.Headers
    content: bytes

    @property
    def body(self) -> Any:
        if not self.content:
            return None
        return json.loads(self.content)


class Recorder:
    """MockTransport handler that records requests and replays queued responses."""

    def __init__(self) -> None:
        self.calls: list[CapturedRequest] = []
        self._queue: list[httpx.Response] = []
        self.transport = httpx.MockTransport(self._handle)

    def reply(
        self,
        status: int = 200,
        json: Any = _UNSET,
        *,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if text is not None:
            self._queue.append(httpx.Response(status, text=text, headers=headers))
        elif json is _UNSET:
            self._queue.append(httpx.Response(status, headers=headers))
        else:
            self._queue.append(httpx.Response(status, json=json, headers=headers))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(
            CapturedRequest(
                method=request.method,
                url=str(request.url),
                path=request.url.path,
                params=dict(request.url.params),
                headers=request.headers,
                content=request.content,
            )
        )
        if self._queue:
            return self._queue.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> CapturedRequest:
        assert self.calls, "no request was sent"
        return self.calls[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(recorder: Recorder) -> ApiClient:
    return ApiClient(base_url=BASE_URL, api_key=API_KEY, transport=recorder.transport)
