from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .errors import EmptyCredentialError, InvalidCredentialError


def _validate_secret(value: object, kind: str) -> str:
    if not isinstance(value, str):
        raise InvalidCredentialError(f"{kind} must be a string, got {type(value).__name__}")
    if not value.strip():
        raise EmptyCredentialError(f"{kind} is empty")
    for char in value:
        code = ord(char)
        if code < 0x20 or code == 0x7F or code > 0xFF:
            raise InvalidCredentialError(f"{kind} contains a character not allowed in an HTTP header")
    return value


@dataclass(frozen=True, slots=True)
class ApiKey:
    """Long-lived Yandex Cloud API key, sent with the ``Api-Key`` scheme."""

    value: str = field(repr=False)

    @classmethod
    def parse(cls, value: str) -> "ApiKey":
        return cls(_validate_secret(value, "API key"))

    def authorization_header(self) -> str:
        return f"Api-Key {self.value}"


@dataclass(frozen=True, slots=True)
class IamToken:
    """Short-lived IAM token, sent with the ``Bearer`` scheme."""

    value: str = field(repr=False)

    @classmethod
    def parse(cls, value: str) -> "IamToken":
        return cls(_validate_secret(value, "IAM token"))

    def authorization_header(self) -> str:
        return f"Bearer {self.value}"


Credential = Union[ApiKey, IamToken]
