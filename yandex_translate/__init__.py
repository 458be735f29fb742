"""
Yandex Translate client

Minimal client for the Yandex Cloud Translate v2 API:
- API key and IAM token authentication
- Blocking client (requests) and async client (aiohttp)
- Typed requests, responses and errors
"""
from .auth import ApiKey, Credential, IamToken
from .asynchronous import AsyncYandexTranslateClient
from .base import BaseTranslateClient
from .blocking import YandexTranslateClient
from .config import API_BASE_URL, SETTINGS
from .errors import (
    ApiError,
    ConfigError,
    EmptyCredentialError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidCredentialError,
    MalformedResponseError,
    TransportError,
    TranslateError,
    YandexTranslateError,
)
from .factory import AVAILABLE_MODES, build_client, get_available_modes
from .models import TranslateRequest, TranslateResponse, Translation
from .utils import configure_logging

__all__ = [
    "ApiKey",
    "IamToken",
    "Credential",
    "BaseTranslateClient",
    "YandexTranslateClient",
    "AsyncYandexTranslateClient",
    "build_client",
    "get_available_modes",
    "AVAILABLE_MODES",
    "API_BASE_URL",
    "SETTINGS",
    "TranslateRequest",
    "TranslateResponse",
    "Translation",
    "YandexTranslateError",
    "ConfigError",
    "EmptyCredentialError",
    "InvalidCredentialError",
    "TranslateError",
    "EmptyInputError",
    "InvalidArgumentError",
    "TransportError",
    "ApiError",
    "MalformedResponseError",
    "configure_logging",
]
