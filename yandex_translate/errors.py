"""
Yandex Translate client errors

Every failure is raised to the caller as one of the types below.
Nothing is retried and nothing is swallowed inside the client.
"""
from __future__ import annotations

from typing import Optional


class YandexTranslateError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(YandexTranslateError, ValueError):
    """Client could not be configured from the given arguments."""


class EmptyCredentialError(ConfigError):
    """API key or IAM token is empty or whitespace-only."""


class InvalidCredentialError(ConfigError):
    """API key or IAM token cannot be sent as an HTTP header value."""


class TranslateError(YandexTranslateError):
    """A translate call failed."""


class EmptyInputError(TranslateError):
    """Request carries no texts to translate."""


class InvalidArgumentError(TranslateError, ValueError):
    """Request failed a precondition check before any network I/O."""


class TransportError(TranslateError):
    """HTTP request could not be completed (connection, DNS, timeout...)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class ApiError(TranslateError):
    """Remote API answered with a non-success status."""

    def __init__(self, status: int, message: str, code: Optional[int] = None) -> None:
        super().__init__(f"API error (HTTP {status}): {message}")
        self.status = status
        self.message = message
        self.code = code


class MalformedResponseError(TranslateError):
    """Success status, but the body does not match the documented shape."""
