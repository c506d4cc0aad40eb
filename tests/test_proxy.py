import pytest

from snipekit.net.proxy import (
    DEFAULT_PROXY_PORT,
    ProxyParseError,
    ProxySettings,
    ProxySpec,
    parse_proxy,
)


@pytest.mark.parametrize(
    "value, host, port",
    [
        ("proxy.example.com", "proxy.example.com", 80),
        ("proxy.example.com:8080", "proxy.example.com", 8080),
        ("http://proxy.example.com:3128/", "proxy.example.com", 3128),
        ("HTTP://proxy.example.com:3128/", "proxy.example.com", 3128),
        ("http://host/", "host", 80),
        ("host/", "host", 80),
        ("host:", "host", 80),
        ("host:/", "host", 80),
        ("host:80/", "host", 80),
        ("10.0.0.1:65535", "10.0.0.1", 65535),
    ],
)
def test_accepted(value, host, port):
    assert parse_proxy(value) == ProxySpec(host=host, port=port)


@pytest.mark.parametrize("value", [None, "", ":", "/", "http://", "http://:8080", "/path"])
def test_disabled(value):
    assert parse_proxy(value) is None


@pytest.mark.parametrize(
    "value",
    [
        "proxy.example.com:8080/extra",
        "host:80/x",
        "host/x",
        "host//",
        "host::",
        "host:80x",
        "host:http",
        "host:99999",
        "host:0",
        "https://host:443/",
    ],
)
def test_rejected(value):
    with pytest.raises(ProxyParseError) as exc:
        parse_proxy(value)
    assert exc.value.value == value
    assert isinstance(exc.value, ValueError)


def test_spec_helpers():
    spec = ProxySpec("proxy.example.com", 3128)
    assert spec.url == "http://proxy.example.com:3128/"
    assert spec.as_proxies() == {
        "http": "http://proxy.example.com:3128/",
        "https": "http://proxy.example.com:3128/",
    }
    assert str(spec) == "proxy.example.com:3128"
    assert ProxySpec("host").port == DEFAULT_PROXY_PORT


def test_settings_store_and_clear():
    settings = ProxySettings()
    assert not settings.enabled

    settings.apply("proxy.example.com:8080")
    assert settings.host == "proxy.example.com"
    assert settings.port == 8080

    settings.apply("")
    assert not settings.enabled
    assert settings.host is None
    assert settings.port is None


def test_settings_cleared_by_none():
    settings = ProxySettings()
    settings.apply("host")
    settings.apply(None)
    assert settings.spec is None


def test_settings_unchanged_on_failure():
    settings = ProxySettings()
    settings.apply("http://proxy.example.com:3128/")

    with pytest.raises(ProxyParseError):
        settings.apply("proxy.example.com:8080/extra")

    assert settings.spec == ProxySpec("proxy.example.com", 3128)


def test_settings_empty_host_disables():
    settings = ProxySettings(ProxySpec("old", 8080))
    assert settings.apply(":") is None
    assert not settings.enabled
