from __future__ import annotations

import json
from typing import Any, List, Optional, Tuple, Union

import pytest


class StubResponse:
    def __init__(self, status_code: int = 200, text: Union[str, bytes] = "") -> None:
        self.status_code = status_code
        self.content = text.encode("utf-8") if isinstance(text, str) else text


class StubSession:
    """Stands in for requests.Session and records every POST."""

    def __init__(self, response: Optional[StubResponse] = None, exc: Optional[Exception] = None) -> None:
        self.response = response or StubResponse()
        self.exc = exc
        self.calls: List[Tuple[str, dict]] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> StubResponse:
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        self.closed = True


class AsyncStubResponse:
    def __init__(self, status: int, body: Union[str, bytes]) -> None:
        self.status = status
        self._body = body.encode("utf-8") if isinstance(body, str) else body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> "AsyncStubResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> bool:
        return False


class AsyncStubSession:
    """Stands in for aiohttp.ClientSession and records every POST."""

    def __init__(self, status: int = 200, body: Union[str, bytes] = "", exc: Optional[BaseException] = None) -> None:
        self.status = status
        self.body = body
        self.exc = exc
        self.calls: List[Tuple[str, dict]] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> AsyncStubResponse:
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return AsyncStubResponse(self.status, self.body)

    async def close(self) -> None:
        self.closed = True


def translations_body(*texts: str, detected: Optional[str] = None) -> str:
    items = []
    for text in texts:
        item = {"text": text}
        if detected:
            item["detectedLanguageCode"] = detected
        items.append(item)
    return json.dumps({"translations": items})


@pytest.fixture
def stub_response():
    return StubResponse


@pytest.fixture
def stub_session():
    return StubSession


@pytest.fixture
def async_stub_session():
    return AsyncStubSession


@pytest.fixture
def make_body():
    return translations_body
