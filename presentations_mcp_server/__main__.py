"""Command line entry point: ``python -m presentations_mcp_server``."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import LOG_LEVELS, TRANSPORTS, Config
from .connection_manager import ConnectionManager, StartupError
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="presentations-mcp-server",
        description="MCP server exposing Java presentations as tools.",
    )
    parser.add_argument("--transport", choices=TRANSPORTS, help="Transport to serve on (default: stdio)")
    parser.add_argument("--host", dest="http_host", help="HTTP bind address")
    parser.add_argument("--port", dest="http_port", type=int, help="HTTP port")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for stderr output",
    )
    return parser


def load_config(argv: Optional[Sequence[str]] = None) -> Config:
    """Environment first, then command line flags on top."""
    args = build_parser().parse_args(argv)
    return Config.from_env().replace(
        transport=args.transport,
        http_host=args.http_host,
        http_port=args.http_port,
        log_level=args.log_level,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = load_config(argv)
    except ValueError as e:
        print(f"presentations-mcp-server: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    manager = ConnectionManager(config)
    try:
        manager.start()
    except StartupError as e:
        logger.error("%s", e)
        return 2

    manager.serve()
    return 0


if __name__ == "__main__":
    sys.exit(main())
