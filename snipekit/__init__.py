"""
snipekit - Support library for an auction sniping client.

Usage:
    snipekit init
    snipekit check --prompt
    snipekit proxy http://proxy.example.com:3128/
"""

__version__ = "0.1.0"

from snipekit.core.config import Config
from snipekit.core.random_source import RandomSource, SystemRandomSource
from snipekit.net.proxy import ProxySpec, ProxySettings, ProxyParseError, parse_proxy
from snipekit.vault.guard import CredentialGuard, Secret

__all__ = [
    # Version
    "__version__",
    # Config
    "Config",
    # Randomness
    "RandomSource",
    "SystemRandomSource",
    # Proxy
    "ProxySpec",
    "ProxySettings",
    "ProxyParseError",
    "parse_proxy",
    # Vault
    "CredentialGuard",
    "Secret",
]
