"""
Blocking Yandex Translate client

Built on ``requests``. ``translate`` blocks the calling thread for one
HTTP round trip; the client never starts threads of its own.
"""
from __future__ import annotations

from typing import Optional

import requests

from .auth import Credential
from .base import BaseTranslateClient
from .config import API_BASE_URL
from .errors import TransportError
from .models import TranslateRequest, TranslateResponse


class YandexTranslateClient(BaseTranslateClient):
    """Synchronous client for CLI tools, scripts and thread-based apps.

    Example::

        client = YandexTranslateClient.with_api_key("my-api-key")
        request = TranslateRequest(folder_id="b1g...", texts=["Hello"], target_language_code="ru")
        print(client.translate(request).texts)
    """

    name = "blocking"

    def __init__(
        self,
        credential: Credential,
        *,
        session: Optional[requests.Session] = None,
        base_url: str = API_BASE_URL,
        timeout: float | None = None,
        proxy: str | None = None,
    ) -> None:
        super().__init__(credential, base_url=base_url, timeout=timeout, proxy=proxy)
        self._owns_session = session is None
        self._session = session

    def _get_session(self) -> requests.Session:
        """Get or create the pooled requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
        return self._session

    def translate(self, request: TranslateRequest) -> TranslateResponse:
        """Translate texts using the Yandex Translate API.

        Raises:
            EmptyInputError, InvalidArgumentError: before any network I/O
            TransportError: the request could not be sent or answered
            ApiError: the API returned a non-success status
            MalformedResponseError: the success body could not be mapped
        """
        payload = self._prepare(request)
        proxies = {"http": self.proxy, "https": self.proxy} if self.proxy else None

        try:
            resp = self._get_session().post(
                self.endpoint,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
                proxies=proxies,
            )
            body = resp.content
        except requests.RequestException as exc:
            raise TransportError(f"Yandex Translate connection error: {exc}", exc) from exc

        return self._map_response(request, resp.status_code, body)

    def close(self) -> None:
        """Close the HTTP session unless it was supplied by the caller."""
        if self._owns_session and self._session is not None:
            self._session.close()
        self._session = None

    def __enter__(self) -> "YandexTranslateClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
