import pytest

from yandex_translate import (
    API_BASE_URL,
    SETTINGS,
    ApiKey,
    AsyncYandexTranslateClient,
    ConfigError,
    EmptyCredentialError,
    IamToken,
    InvalidCredentialError,
    YandexTranslateClient,
)


@pytest.mark.parametrize("key", ["AQVN1abc", "k", "key-with.dots_and-dashes"])
def test_api_key_header(key):
    client = YandexTranslateClient.with_api_key(key)
    assert client.credential == ApiKey(key)
    assert client._headers()["Authorization"] == "Api-Key " + key


def test_iam_token_header():
    client = AsyncYandexTranslateClient.with_iam_token("t1.9euelZq")
    assert client._headers() == {
        "Authorization": "Bearer t1.9euelZq",
        "Content-Type": "application/json",
    }


@pytest.mark.parametrize("value", ["", " ", "\t\n", "   "])
@pytest.mark.parametrize("factory", [
    YandexTranslateClient.with_api_key,
    YandexTranslateClient.with_iam_token,
    AsyncYandexTranslateClient.with_api_key,
    AsyncYandexTranslateClient.with_iam_token,
])
def test_blank_credentials_are_rejected(factory, value):
    with pytest.raises(EmptyCredentialError):
        factory(value)


@pytest.mark.parametrize("value", ["abc\ndef", "abc\r\n", "key\x00", "ключ"])
def test_header_unsafe_credentials_are_rejected(value):
    with pytest.raises(InvalidCredentialError):
        YandexTranslateClient.with_api_key(value)


def test_non_string_credential_is_rejected():
    with pytest.raises(InvalidCredentialError):
        IamToken.parse(12345)


def test_config_errors_are_value_errors():
    with pytest.raises(ValueError):
        YandexTranslateClient.with_api_key("")


def test_constructor_requires_credential_variant():
    with pytest.raises(ConfigError):
        YandexTranslateClient("plain-string-key")


def test_secret_is_hidden_from_repr():
    assert "secret" not in repr(ApiKey("secret"))
    assert "secret" not in repr(IamToken("secret"))


def test_with_base_url_is_chainable():
    client = YandexTranslateClient.with_api_key("key").with_base_url("http://localhost:8080/v2/")
    assert client.endpoint == "http://localhost:8080/v2/translate"


def test_with_base_url_rejects_empty():
    client = YandexTranslateClient.with_api_key("key")
    with pytest.raises(ConfigError):
        client.with_base_url("")


@pytest.mark.parametrize("value", [None, 8080, b"http://localhost"])
def test_with_base_url_rejects_non_string(value):
    client = YandexTranslateClient.with_api_key("key")
    with pytest.raises(ConfigError):
        client.with_base_url(value)


@pytest.mark.parametrize("client_cls", [YandexTranslateClient, AsyncYandexTranslateClient])
def test_direct_constructors_ignore_settings(monkeypatch, client_cls):
    monkeypatch.setattr(SETTINGS.client, "base_url", "http://elsewhere.example")
    monkeypatch.setattr(SETTINGS.client, "timeout", "9")
    monkeypatch.setattr(SETTINGS.client, "proxy", "http://proxy:3128")

    client = client_cls.with_api_key("key")

    assert client.endpoint == f"{API_BASE_URL}/translate"
    assert client.timeout is None
    assert client.proxy is None
