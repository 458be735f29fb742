"""
Client Factory

Builds a blocking or async client from explicit arguments, falling back to
the environment-driven settings for anything left out.
"""
from __future__ import annotations

from typing import Dict, Optional, Type

from .auth import ApiKey, Credential, IamToken
from .asynchronous import AsyncYandexTranslateClient
from .base import BaseTranslateClient
from .blocking import YandexTranslateClient
from .config import SETTINGS
from .errors import ConfigError, EmptyCredentialError


AVAILABLE_MODES = {
    "blocking": "Blocking (requests)",
    "async": "Asynchronous (aiohttp)",
}

_CLIENTS: Dict[str, Type[BaseTranslateClient]] = {
    "blocking": YandexTranslateClient,
    "async": AsyncYandexTranslateClient,
}


def get_available_modes() -> dict[str, str]:
    """Get available execution modes with display names."""
    return AVAILABLE_MODES.copy()


def build_client(
    mode: Optional[str] = None,
    *,
    api_key: Optional[str] = None,
    iam_token: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    proxy: Optional[str] = None,
) -> BaseTranslateClient:
    """Build a translate client.

    Args:
        mode: ``blocking`` or ``async`` (defaults to ``YANDEX_TRANSLATE_MODE``)
        api_key: Yandex Cloud API key
        iam_token: IAM token; mutually exclusive with ``api_key``
        base_url: Override for the API base URL
        timeout: Transport timeout in seconds
        proxy: Optional proxy URL

    Returns:
        BaseTranslateClient instance

    Raises:
        ConfigError: If the mode is unknown, or not exactly one credential is available
    """
    resolved_mode = (mode or SETTINGS.client.mode).lower()
    client_cls = _CLIENTS.get(resolved_mode)
    if client_cls is None:
        raise ConfigError(f"Unsupported execution mode: {mode or SETTINGS.client.mode}")

    credential = _resolve_credential(api_key=api_key, iam_token=iam_token)
    return client_cls(
        credential,
        base_url=base_url or SETTINGS.client.base_url,
        timeout=timeout if timeout is not None else _resolve_timeout(SETTINGS.client.timeout),
        proxy=proxy or SETTINGS.client.proxy,
    )


def _resolve_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"YANDEX_TRANSLATE_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"YANDEX_TRANSLATE_TIMEOUT must be positive, got {raw!r}")
    return value


def _resolve_credential(*, api_key: Optional[str], iam_token: Optional[str]) -> Credential:
    if api_key is not None and iam_token is not None:
        raise ConfigError("Pass either api_key or iam_token, not both")
    if api_key is not None:
        return ApiKey.parse(api_key)
    if iam_token is not None:
        return IamToken.parse(iam_token)

    # Explicit arguments win; the environment is only a fallback.
    secrets = SETTINGS.credentials
    if secrets.api_key and secrets.iam_token:
        raise ConfigError("Both YANDEX_API_KEY and YANDEX_IAM_TOKEN are set; keep only one")
    if secrets.api_key:
        return ApiKey.parse(secrets.api_key)
    if secrets.iam_token:
        return IamToken.parse(secrets.iam_token)
    raise EmptyCredentialError("An API key or IAM token is required")
