from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: logging.StreamHandler | None = None


def setup_logging(level: int = logging.INFO, stream=None) -> logging.Logger:
    """
    Attach a console handler to the ``circuitcore`` logger.

    Calling it again only updates the level, so scenes can call it freely.

    Args:
        level: Logging level for both the logger and the console handler.
        stream: Output stream (default: ``sys.stderr``).

    Returns:
        The configured ``circuitcore`` logger.
    """
    global _console_handler

    logger = logging.getLogger("circuitcore")
    logger.setLevel(level)
    if _console_handler is None:
        _console_handler = logging.StreamHandler(stream or sys.stderr)
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_console_handler)
    _console_handler.setLevel(level)
    return logger
