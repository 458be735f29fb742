"""
Asynchronous Yandex Translate client

Built on ``aiohttp``. ``translate`` suspends only while waiting on the
network; no background tasks are started. Cancellation and deadlines belong
to the caller (``asyncio.wait_for``, task cancellation) or to the transport
``timeout``.
"""
from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp

from .auth import Credential
from .base import BaseTranslateClient
from .config import API_BASE_URL
from .errors import TransportError
from .models import TranslateRequest, TranslateResponse


class AsyncYandexTranslateClient(BaseTranslateClient):
    """Async client for web servers, workers and other asyncio apps."""

    name = "async"

    def __init__(
        self,
        credential: Credential,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        base_url: str = API_BASE_URL,
        timeout: float | None = None,
        proxy: str | None = None,
    ) -> None:
        super().__init__(credential, base_url=base_url, timeout=timeout, proxy=proxy)
        self._owns_session = session is None
        self._session = session

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    async def translate(self, request: TranslateRequest) -> TranslateResponse:
        """Translate texts using the Yandex Translate API.

        Same contract as the blocking client; see
        :meth:`yandex_translate.blocking.YandexTranslateClient.translate`.
        """
        payload = self._prepare(request)
        session = await self._get_session()
        options = {}
        if self.timeout is not None:
            options["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with session.post(
                self.endpoint,
                json=payload,
                headers=self._headers(),
                proxy=self.proxy,
                **options,
            ) as resp:
                status = resp.status
                body = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"Yandex Translate connection error: {exc!r}", exc) from exc

        return self._map_response(request, status, body)

    async def close(self) -> None:
        """Close the session unless it was supplied by the caller."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "AsyncYandexTranslateClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
