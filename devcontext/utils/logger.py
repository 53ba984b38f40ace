"""
Logger
Logging for the DevContext MCP Server.

Everything goes to stderr: in stdio mode stdout is the MCP channel.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_level(level: str) -> int:
    """Level name to logging constant; unknown names mean DEBUG."""
    return getattr(logging, level.upper(), logging.DEBUG)


class Logger:
    """Named stderr logger whose level can be changed after config loads."""

    def __init__(self, name: str = "devcontext-server", level: str = "DEBUG"):
        self.logger = logging.getLogger(name)

        # One stderr handler per name, however many servers are built
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

        self.setLevel(level)

    def setLevel(self, level: str) -> None:
        resolved = parse_level(level)
        self.logger.setLevel(resolved)
        for handler in self.logger.handlers:
            handler.setLevel(resolved)

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)

    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)
