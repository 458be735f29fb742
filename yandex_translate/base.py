from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Dict, Optional, Tuple, Union

from .auth import ApiKey, Credential, IamToken
from .config import API_BASE_URL
from .errors import ApiError, ConfigError, MalformedResponseError
from .models import TranslateRequest, TranslateResponse


class BaseTranslateClient(ABC):
    """Shared request building and response mapping for both execution modes.

    Subclasses only perform the HTTP POST; everything before and after the
    wire lives here so the blocking and async clients cannot drift apart.
    """

    name: str = "base"

    def __init__(
        self,
        credential: Credential,
        *,
        base_url: str = API_BASE_URL,
        timeout: float | None = None,
        proxy: str | None = None,
    ) -> None:
        if not isinstance(credential, (ApiKey, IamToken)):
            raise ConfigError(
                f"credential must be ApiKey or IamToken, got {type(credential).__name__}"
            )
        self.credential = credential
        self.base_url = ""
        self.with_base_url(base_url)
        self.timeout = timeout
        self.proxy = proxy
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def with_api_key(cls, api_key: str, **options: Any):
        """Create a client authenticated with a Yandex Cloud API key."""
        return cls(ApiKey.parse(api_key), **options)

    @classmethod
    def with_iam_token(cls, iam_token: str, **options: Any):
        """Create a client authenticated with an IAM bearer token."""
        return cls(IamToken.parse(iam_token), **options)

    def with_base_url(self, base_url: str):
        """Point the client at another endpoint (proxy, mock server...)."""
        if not isinstance(base_url, str):
            raise ConfigError(f"base_url must be a string, got {type(base_url).__name__}")
        if not base_url.strip():
            raise ConfigError("base_url must not be empty")
        self.base_url = base_url.rstrip("/")
        return self

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/translate"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.credential.authorization_header(),
            "Content-Type": "application/json",
        }

    def _prepare(self, request: TranslateRequest) -> Dict[str, Any]:
        request.validate()
        payload = request.to_payload()
        self.logger.debug(
            f"POST {self.endpoint} ({len(payload['texts'])} texts -> {request.target_language_code})"
        )
        return payload

    def _map_response(
        self, request: TranslateRequest, status: int, body: Union[str, bytes]
    ) -> TranslateResponse:
        self.logger.debug(f"{self.endpoint} answered HTTP {status}")
        if not 200 <= status < 300:
            if isinstance(body, bytes):
                body = body.decode("utf-8", errors="replace")
            message, code = _extract_error(status, body)
            raise ApiError(status, message, code)

        try:
            if isinstance(body, bytes):
                body = body.decode("utf-8")
            data = json.loads(body)
        except UnicodeDecodeError as exc:
            raise MalformedResponseError(f"response body is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(f"response body is not valid JSON: {exc}") from exc

        response = TranslateResponse.from_payload(data)
        if len(response.translations) != len(request.texts):
            raise MalformedResponseError(
                f"API returned {len(response.translations)} translations for {len(request.texts)} texts"
            )
        return response

    @abstractmethod
    def translate(
        self, request: TranslateRequest
    ) -> Union[TranslateResponse, Awaitable[TranslateResponse]]:
        """Translate ``request.texts``; exactly one HTTP attempt is made."""

    @abstractmethod
    def close(self) -> Optional[Awaitable[None]]:
        """Release the transport if this client created it."""


def _extract_error(status: int, body: str) -> Tuple[str, Optional[int]]:
    # Yandex Cloud errors look like {"code": 3, "message": "...", "details": [...]}
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        data = None

    if isinstance(data, dict) and isinstance(data.get("message"), str):
        code = data.get("code")
        return data["message"], code if isinstance(code, int) else None

    if body:
        return f"API returned status {status}: {body[:200]}", None
    return f"API returned status {status}", None
