"""
Command-line interface for the data access ledger.

Commands:
- run: Start the HTTP server (FastAPI under uvicorn)
- show-config: Print the resolved configuration

Usage:
    access-ledger run [--host HOST] [--port PORT]
    access-ledger show-config

Environment Variables:
    LEDGER_HOST: Host to bind (default: 0.0.0.0)
    LEDGER_PORT: Port to bind (default: 8080)
    LEDGER_LOG_LEVEL: Root log level (default: INFO)
"""

import argparse
import logging
import sys

from access_ledger.config import LoggingSettings


def configure_logging(settings: LoggingSettings) -> None:
    """Configure the root logger from the logging settings section."""
    logging.basicConfig(level=settings.level, format=settings.format_string, force=True)


def cmd_show_config(args: argparse.Namespace) -> int:
    """Print the configuration summary. Returns 0."""
    from access_ledger.config import print_config_summary

    print_config_summary()
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    """
    Run the ledger HTTP server until interrupted.

    Configuration Priority:
        1. CLI arguments (--host, --port)
        2. Environment variables (LEDGER_HOST, LEDGER_PORT)
        3. config/server.ini
        4. Default values (0.0.0.0:8080)

    Returns:
        0 on clean shutdown (Ctrl+C), 1 on startup error
    """
    from access_ledger.api.server import start_server
    from access_ledger.config import config

    host = getattr(args, "host", None)
    port = getattr(args, "port", None)

    try:
        configure_logging(config.logging)
        start_server(host=host, port=port, cfg=config)
        return 0
    except KeyboardInterrupt:
        print("\nServer stopped.")
        return 0
    except Exception as e:
        print(f"Error starting server: {e}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="access-ledger",
        description="Data Access Ledger - hash-linked audit log of data access control",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser(
        "run",
        help="Run the ledger server",
        description="Start the HTTP server with a fresh genesis block and an empty table.",
    )
    run_parser.add_argument(
        "--port",
        "-p",
        type=int,
        help="Server port (default: 8080, or LEDGER_PORT env var)",
    )
    run_parser.add_argument(
        "--host",
        type=str,
        help="Host to bind to (default: 0.0.0.0, or LEDGER_HOST env var)",
    )
    run_parser.set_defaults(func=cmd_run)

    config_parser = subparsers.add_parser(
        "show-config",
        help="Print the resolved configuration",
    )
    config_parser.set_defaults(func=cmd_show_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
