"""
CLI entry point for Money Cycle MCP server.
"""

import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from money_cycle_mcp.server import run_server


def parse_today(value: str) -> date:
    """Parse the --today flag (YYYY-MM-DD)."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid date: {value!r} (expected YYYY-MM-DD)"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Money Cycle MCP Server - Currency and billing cycle tools over MCP"
    )
    parser.add_argument(
        "--data-path",
        type=Path,
        help="Path to JSON data file with cards and plans "
        "(default: $MONEY_CYCLE_DATA or ~/.config/money-cycle/data.json)",
    )
    parser.add_argument(
        "--today",
        type=parse_today,
        help="Pin the reference date for billing calculations (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,  # MCP uses stdout for protocol, so log to stderr
    )

    if args.today:
        logging.info(f"Using fixed reference date {args.today.isoformat()}")

    # Run the server
    try:
        asyncio.run(run_server(data_path=args.data_path, today=args.today))
    except KeyboardInterrupt:
        logging.info("Server stopped by user")
        sys.exit(0)
    except Exception as e:
        logging.exception(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
