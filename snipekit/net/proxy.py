"""
Proxy address parsing.

Path: snipekit/net/proxy.py

Accepted forms:

    "http://host.at.some.domain:80/"
    "http://host.at.some.domain/"
    "host.at.some.domain:8080"
    "host.at.some.domain"
    ""

If the port is not specified, it is 80. If the string (or the host part)
is empty, the proxy is disabled. Anything else is rejected.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional


logger = logging.getLogger(__name__)

DEFAULT_PROXY_PORT = 80
MAX_PROXY_PORT = 65535

_HTTP_PREFIX = "http://"
_DIGITS = "0123456789"


class ProxyParseError(ValueError):
    """Raised when a proxy string does not match the accepted grammar."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid proxy '{value}': {reason}")


@dataclass(frozen=True)
class ProxySpec:
    """Validated proxy host and port."""

    host: str
    port: int = DEFAULT_PROXY_PORT

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    def as_proxies(self) -> Dict[str, str]:
        """Proxy mapping in the form HTTP client libraries expect."""
        return {"http": self.url, "https": self.url}

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


def parse_proxy(value: Optional[str]) -> Optional[ProxySpec]:
    """
    Parse a proxy configuration string.

    Args:
        value: Proxy string, or None.

    Returns:
        ProxySpec, or None if the proxy is disabled (no value, empty
        string, or empty host).

    Raises:
        ProxyParseError: If the string is malformed.
    """
    if value is None:
        return None

    rest = value
    if rest[:len(_HTTP_PREFIX)].lower() == _HTTP_PREFIX:
        rest = rest[len(_HTTP_PREFIX):]

    # Host runs up to the first ':' or '/'
    end = len(rest)
    for i, ch in enumerate(rest):
        if ch in ":/":
            end = i
            break

    host = rest[:end]
    if not host:
        return None

    rest = rest[end:]
    port = DEFAULT_PROXY_PORT

    if rest.startswith(":"):
        rest = rest[1:]
        digits = 0
        while digits < len(rest) and rest[digits] in _DIGITS:
            digits += 1
        if digits:
            port = int(rest[:digits])
            if port > MAX_PROXY_PORT:
                raise _reject(value, f"port {port} out of range")
            if port == 0:
                raise _reject(value, "port must be positive")
            rest = rest[digits:]

    if rest not in ("", "/"):
        raise _reject(value, f"unexpected trailing text '{rest}'")

    return ProxySpec(host=host, port=port)


def _reject(value: str, reason: str) -> ProxyParseError:
    logger.debug("Rejected proxy %r: %s", value, reason)
    return ProxyParseError(value, reason)


class ProxySettings:
    """
    Stored proxy configuration.

    apply() replaces the stored spec on success, clears it when the
    proxy is disabled, and leaves it untouched on a parse failure.
    """

    def __init__(self, spec: Optional[ProxySpec] = None):
        self.spec = spec

    @property
    def enabled(self) -> bool:
        return self.spec is not None

    @property
    def host(self) -> Optional[str]:
        return self.spec.host if self.spec else None

    @property
    def port(self) -> Optional[int]:
        return self.spec.port if self.spec else None

    def apply(self, value: Optional[str]) -> Optional[ProxySpec]:
        """
        Parse value and store the result.

        Returns:
            The new ProxySpec, or None if the proxy is now disabled.

        Raises:
            ProxyParseError: If value is malformed. Stored state is unchanged.
        """
        self.spec = parse_proxy(value)
        if self.spec:
            logger.debug("Proxy set to %s", self.spec)
        else:
            logger.debug("Proxy disabled")
        return self.spec

    def clear(self):
        self.spec = None

    def __repr__(self) -> str:
        return f"<ProxySettings {self.spec or 'disabled'}>"
