"""
snipekit CLI - Main entry point.

Usage:
    snipekit init                      # Write default config
    snipekit check [options]           # Validate config, proxy, password
    snipekit proxy <value>             # Parse a proxy string
"""

import argparse
import logging
import sys

from snipekit import __version__


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="snipekit",
        description="Auction sniping client support tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  init        Write a default configuration file
  check       Load configuration and report proxy and credential state
  proxy       Parse a proxy string

Examples:
  # First-time setup
  snipekit init

  # Validate configuration, prompting for the password
  snipekit check --prompt

  # Try out a proxy setting
  snipekit proxy http://proxy.example.com:3128/

Use 'snipekit <command> --help' for more information on a command.
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    # Init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description="Create the base directory and a commented config.yaml",
    )
    _setup_init_parser(init_parser)

    # Check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate configuration",
        description="Load configuration and report proxy and credential state",
    )
    _setup_check_parser(check_parser)

    # Proxy subcommand
    proxy_parser = subparsers.add_parser(
        "proxy",
        help="Parse a proxy string",
        description="Parse a proxy string and show the resulting host and port",
    )
    proxy_parser.add_argument(
        "value",
        help='Proxy string, e.g. "http://host:3128/" (empty disables)',
    )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        from snipekit.core.debug_log import configure_logging

        configure_logging(level=logging.DEBUG)

    if not args.command:
        parser.print_help()
        return 0

    try:
        return _dispatch(parser, args)
    except MemoryError:
        logger.critical("Cannot allocate memory")
        print("Cannot allocate memory", file=sys.stderr)
        return 1


def _dispatch(parser: argparse.ArgumentParser, args) -> int:
    """Dispatch to subcommand handler."""
    if args.command == "init":
        from snipekit.cli.commands import handle_init

        return handle_init(args)
    elif args.command == "check":
        from snipekit.cli.commands import handle_check

        return handle_check(args)
    elif args.command == "proxy":
        from snipekit.cli.commands import handle_proxy

        return handle_proxy(args)
    else:
        parser.print_help()
        return 1


def _setup_init_parser(parser: argparse.ArgumentParser):
    """Set up init subcommand parser."""
    parser.add_argument(
        "--dir", "-d",
        help="Base directory (default: ~/.snipekit)"
    )


def _setup_check_parser(parser: argparse.ArgumentParser):
    """Set up check subcommand parser."""
    parser.add_argument(
        "--config", "-c",
        help="Config file (default: ~/.snipekit/config.yaml or SNIPEKIT_CONFIG)"
    )
    parser.add_argument(
        "--prompt", "-p",
        action="store_true",
        help="Prompt for the password even if one is configured"
    )


if __name__ == "__main__":
    sys.exit(main())
