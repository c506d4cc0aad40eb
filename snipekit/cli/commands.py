"""
CLI command handlers.

Handles: snipekit init | check | proxy
"""

import logging
from pathlib import Path

from snipekit.core.config import Config, CONFIG_ENV_VAR
from snipekit.core.debug_log import configure_logging
from snipekit.core.prompt import prompt
from snipekit.net.proxy import ProxyParseError, parse_proxy


def handle_init(args) -> int:
    """Write a default config file."""
    if args.dir:
        base_dir = Path(args.dir).expanduser()
        config = Config(
            base_dir=base_dir,
            config_file=base_dir / "config.yaml",
            log_dir=base_dir / "logs",
        )
    else:
        config = Config()

    print(f"Config: {config.config_file}")

    try:
        written = config.save_default_config()
    except OSError as e:
        print(f"Error: {e}")
        return 1

    if not written:
        print("Config already exists")
        return 1

    print("\n✓ Default configuration written")
    print("\nNext steps:")
    print(f"  Edit {config.config_file} and set your username")
    print("  snipekit check")
    return 0


def handle_check(args) -> int:
    """Load config and report proxy and credential state."""
    config_path = Path(args.config) if args.config else None

    try:
        config = Config.load(config_path)
    except ProxyParseError as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        if not args.config:
            print(f"(config path can be set with {CONFIG_ENV_VAR})")
        return 1

    try:
        try:
            _apply_logging(config, args)
        except OSError as e:
            print(f"Error: Cannot open log file: {e}")
            return 1

        print(f"Config: {config.config_file}")
        print(f"  Username: {config.username or '(not set)'}")

        if config.proxy.enabled:
            print(f"  Proxy:    {config.proxy.spec}")
        else:
            print("  Proxy:    disabled")

        print(f"  Debug:    {'on' if config.debug else 'off'}")

        if args.prompt or (config.username and not config.credentials.is_set):
            password = prompt("Password: ", noecho=True)
            if password is None:
                print("Error: Cannot read password")
                return 1
            config.set_password(password)

        if config.credentials.is_set:
            state = "obfuscated" if config.credentials.obfuscated else "plain text"
            print(f"  Password: set ({state})")
        else:
            print("  Password: (not set)")

        for warning in config.check_warnings():
            print(f"\nWarning: {warning}")

        return 0
    finally:
        config.close()


def _apply_logging(config: Config, args):
    """Apply the config's logging section unless --verbose already configured logging."""
    if getattr(args, "verbose", False):
        return

    handler = None
    if config.logging.file:
        handler = logging.FileHandler(config.logging.file, encoding="utf-8")

    configure_logging(level=getattr(logging, config.logging.level), handler=handler)


def handle_proxy(args) -> int:
    """Parse a single proxy string."""
    try:
        spec = parse_proxy(args.value)
    except ProxyParseError as e:
        print(f"Error: {e}")
        return 1

    if spec is None:
        print("disabled")
    else:
        print(f"{spec.host}:{spec.port}")
    return 0
