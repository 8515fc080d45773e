"""Logging configuration. Outputs to stderr; stdout carries the MCP stdio transport."""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logger(name: str = "jira_mcp_server", level: str = "INFO") -> logging.Logger:
    """Return the package logger with a single stderr handler at ``level``.

    Calling it again only updates the level, so it is safe to call from both
    the entry point and the server lifespan.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
