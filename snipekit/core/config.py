"""
Configuration management for snipekit.

Handles loading config from ~/.snipekit/config.yaml and providing
default values for all settings.

A Config instance is the context object for a session: it owns the
guarded password and the parsed proxy, so several independent contexts
can exist side by side (tests create one per case).
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml

from snipekit.core.random_source import RandomSource
from snipekit.core.util import bool_value
from snipekit.net.proxy import ProxySettings
from snipekit.vault.guard import CredentialGuard


logger = logging.getLogger(__name__)

# Default paths
DEFAULT_BASE_DIR = Path.home() / ".snipekit"
DEFAULT_CONFIG_FILE = DEFAULT_BASE_DIR / "config.yaml"
DEFAULT_LOG_DIR = DEFAULT_BASE_DIR / "logs"

CONFIG_ENV_VAR = "SNIPEKIT_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    file: Optional[Path] = None


@dataclass
class Config:
    """Main configuration container."""

    # Base directory
    base_dir: Path = DEFAULT_BASE_DIR
    config_file: Path = DEFAULT_CONFIG_FILE
    log_dir: Path = DEFAULT_LOG_DIR

    # Account
    username: Optional[str] = None
    debug: bool = False

    # Session state
    random_source: RandomSource = field(default_factory=RandomSource.from_process, repr=False)
    credentials: CredentialGuard = field(default=None, repr=False)
    proxy: ProxySettings = field(default_factory=ProxySettings)

    # Logging
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Password was read from the config file itself
    _password_in_file: bool = field(default=False, repr=False)

    def __post_init__(self):
        if self.credentials is None:
            self.credentials = CredentialGuard(self.random_source)

    @classmethod
    def load(
        cls,
        config_path: Optional[Path] = None,
        random_source: Optional[RandomSource] = None,
    ) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to config file. If None, uses default location.
                         Can also be set via SNIPEKIT_CONFIG env var.
            random_source: Byte source for the credential guard. If None,
                           one is seeded from process id and time.

        Returns:
            Config instance with values from file merged with defaults.

        Raises:
            ValueError: Invalid YAML or an invalid setting value.
            ProxyParseError: Malformed proxy string.
        """
        # Determine config path
        if config_path is None:
            config_path = Path(
                os.environ.get(CONFIG_ENV_VAR, str(DEFAULT_CONFIG_FILE))
            )
        config_path = Path(config_path).expanduser()

        if random_source is None:
            config = cls()
        else:
            config = cls(random_source=random_source)
        config.config_file = config_path

        # If config file doesn't exist, return defaults
        if not config_path.exists():
            logger.debug("No config file at %s, using defaults", config_path)
            return config

        # Load YAML
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config YAML: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Invalid config YAML: expected a mapping in {config_path}")

        # Paths
        if "base_dir" in data:
            config.base_dir = Path(data["base_dir"]).expanduser()
            config.log_dir = config.base_dir / "logs"

        if "log_dir" in data:
            config.log_dir = Path(data["log_dir"]).expanduser()

        # Account
        if data.get("username") is not None:
            config.username = str(data["username"])

        if "debug" in data:
            debug = bool_value(data["debug"])
            if debug < 0:
                raise ValueError(f"Invalid value for debug: {data['debug']!r}")
            config.debug = bool(debug)

        # Proxy (empty or missing disables it)
        if "proxy" in data:
            proxy = data["proxy"]
            config.proxy.apply(str(proxy) if proxy is not None else None)

        # Logging settings
        if "logging" in data:
            log_data = data["logging"] or {}
            if not isinstance(log_data, dict):
                raise ValueError(f"Invalid value for logging: expected a mapping, got {log_data!r}")
            level = str(log_data.get("level", "INFO")).upper()
            if level not in LOG_LEVELS:
                raise ValueError(f"Invalid logging level: {level}")
            log_file = log_data.get("file")
            config.logging = LoggingConfig(
                level=level,
                file=Path(log_file).expanduser() if log_file else None,
            )

        # Password goes straight into the guard; nothing after this may raise
        password = data.get("password")
        if password is not None:
            config.set_password(str(password))
            config._password_in_file = True

        return config

    def set_password(self, password: Optional[str]):
        """Replace the stored password and obfuscate it immediately."""
        self.credentials.load(password)
        self.credentials.protect()

    def check_warnings(self) -> List[str]:
        """
        Check for configuration issues that need attention.

        Returns:
            List of warning messages.
        """
        warnings = []

        if self._password_in_file:
            warnings.append(
                f"Config file {self.config_file} contains a plain text password. "
                "Remove it and enter the password when prompted."
            )

        if self.username and not self.credentials.is_set:
            warnings.append(
                f"No password configured for user '{self.username}'."
            )

        return warnings

    def ensure_directories(self):
        """Create required directories if they don't exist."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        self.log_dir.mkdir(parents=True, exist_ok=True)

    def save_default_config(self) -> bool:
        """
        Save a default config file if one doesn't exist.

        Returns:
            True if a file was written.
        """
        if self.config_file.exists():
            return False

        self.ensure_directories()
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        default_config = f"""\
# snipekit Configuration

# =============================================================================
# Account
# =============================================================================

# Auction site user name
username:

# Leave the password out of this file; you will be prompted for it.
# password:

# =============================================================================
# Network
# =============================================================================

# HTTP proxy, e.g. "http://proxy.example.com:3128/" (empty disables)
proxy:

# =============================================================================
# Logging
# =============================================================================

# Write per-auction debug logs (yes/no, on/off, true/false, enabled/disabled)
debug: no

log_dir: {self.log_dir}

logging:
  level: INFO              # DEBUG, INFO, WARNING, ERROR
"""

        with open(self.config_file, "w") as f:
            f.write(default_config)

        return True

    def close(self):
        """Dispose the guarded password."""
        self.credentials.dispose()
