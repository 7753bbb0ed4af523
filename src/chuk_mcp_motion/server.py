#!/usr/bin/env python3
"""
Entry point for the CHUK Motion MCP Server.

Runs the motion token tools over stdio or http. Project themes are
read from ./themes unless --themes-dir (or CHUK_MOTION_THEMES_DIR)
points elsewhere.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Motion MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--themes-dir",
        default=None,
        help="Project themes directory (default: ./themes)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.themes_dir:
        os.environ["CHUK_MOTION_THEMES_DIR"] = args.themes_dir

    # Import after argument parsing so the themes directory is picked up
    from chuk_mcp_motion.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Motion MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Motion MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
