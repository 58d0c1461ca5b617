"""
Entry point for running workout_mcp as a module.

Usage:
    python -m workout_mcp                    # Run MCP over stdio
    python -m workout_mcp --rest             # Run the REST facade
    python -m workout_mcp --rest --port 9000 # REST on a custom port
"""

import argparse
import logging
import os
import sys

from workout_mcp import configure_logging, run
from workout_mcp.config import load_settings
from workout_mcp.errors import ConfigError

logger = logging.getLogger("workout_mcp")


def main():
    parser = argparse.ArgumentParser(
        description="Workout MCP Server - Firestore workout data and AI recommendations"
    )
    parser.add_argument(
        "--rest",
        action="store_true",
        help="Serve the REST facade instead of MCP over stdio"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (default: $HOST or 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for the REST facade (default: $PORT or 3000)"
    )

    args = parser.parse_args()

    # Command-line flags override the environment
    if args.rest:
        os.environ["MCP_TRANSPORT"] = "rest"
    if args.host:
        os.environ["HOST"] = args.host
    if args.port is not None:
        os.environ["PORT"] = str(args.port)

    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        run(settings)
    except ConfigError as e:
        configure_logging()
        logger.error(f"Configuration error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
