#!/usr/bin/env python3
"""
DevContext CLI Entry Point

Handles:
- Choosing the pattern store directory
- Server modes (stdio, http)
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

from devcontext import __version__, __package_name__
from devcontext.config import ConfigManager


def print_version():
    """Print version info."""
    print(f"{__package_name__} v{__version__}")


async def main_async(args: argparse.Namespace):
    """Async main entry point."""
    contexts_path = Path(args.contexts_path).expanduser() if args.contexts_path else None
    config = ConfigManager(contexts_path=contexts_path)

    if args.http:
        # Port is read from the environment when config loads
        os.environ["MCP_PORT"] = str(args.port)
        from devcontext.server_http import main as http_main
        await http_main(config)
    else:
        from devcontext.server import run_stdio
        await run_stdio(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devcontext",
        description="DevContext - development pattern MCP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  devcontext                          Run in stdio mode (default)
  devcontext --http --port 3000       Run HTTP server on port 3000
  devcontext --contexts-path ./docs   Serve patterns from ./docs

MCP Configuration (mcp.json):

  {
    "mcpServers": {
      "devcontext": {
        "command": "devcontext"
      }
    }
  }
"""
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Run in stdio mode (default)"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Run in HTTP mode"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        default=int(os.getenv("MCP_PORT", "8000")),
        help="HTTP port (default: 8000)"
    )
    parser.add_argument(
        "--contexts-path", "-c",
        default=None,
        help="Pattern store directory (default: $DEVCONTEXT_CONTEXTS_PATH or bundled contexts/)"
    )
    return parser


def main():
    """Main CLI entry point."""
    args = build_parser().parse_args()

    if args.version:
        print_version()
        sys.exit(0)

    asyncio.run(main_async(args))


if __name__ == "__main__":
    main()
