from __future__ import annotations

from dataclasses import dataclass, field
import os


API_BASE_URL = "https://translate.api.cloud.yandex.net/translate/v2"


@dataclass(slots=True)
class ClientSettings:
    base_url: str = field(default_factory=lambda: os.getenv("YANDEX_TRANSLATE_URL", API_BASE_URL))
    # Kept as text; parsed by the factory so a bad value cannot break import.
    timeout: str | None = field(default_factory=lambda: os.getenv("YANDEX_TRANSLATE_TIMEOUT"))
    proxy: str | None = field(default_factory=lambda: os.getenv("YANDEX_TRANSLATE_PROXY"))
    mode: str = field(default_factory=lambda: os.getenv("YANDEX_TRANSLATE_MODE", "blocking"))


@dataclass(slots=True)
class Credentials:
    api_key: str | None = field(default_factory=lambda: os.getenv("YANDEX_API_KEY"))
    iam_token: str | None = field(default_factory=lambda: os.getenv("YANDEX_IAM_TOKEN"))


@dataclass(slots=True)
class AppSettings:
    client: ClientSettings = field(default_factory=ClientSettings)
    credentials: Credentials = field(default_factory=Credentials)


SETTINGS = AppSettings()
