"""Proxy configuration."""

from snipekit.net.proxy import (
    DEFAULT_PROXY_PORT,
    ProxyParseError,
    ProxySettings,
    ProxySpec,
    parse_proxy,
)

__all__ = [
    "DEFAULT_PROXY_PORT",
    "ProxyParseError",
    "ProxySettings",
    "ProxySpec",
    "parse_proxy",
]
