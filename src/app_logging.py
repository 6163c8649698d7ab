"""Logging configuration helpers."""

import logging

LOGGER_NAME = "factcheck_mcp"


def configure_logging(level: str = "INFO") -> None:
    """Configure the project logger with a single stderr stream handler.

    stdout carries the MCP stdio transport, so nothing may be logged there.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
