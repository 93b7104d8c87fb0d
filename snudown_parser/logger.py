"""Logging helpers for snudown-parser.

Example:
    >>> from snudown_parser.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "snudown_parser"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``snudown_parser``.

    Args:
        name: Logger name, typically ``__name__``.

    Returns:
        logging.Logger: Standard library logger with the package prefix.

    Examples:
        get_logger("scanner").name  # "snudown_parser.scanner"
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def enable_debug_logging(stream=None) -> logging.Handler:
    """Attach a debug-level stream handler to the package logger.

    Args:
        stream: Target stream; defaults to ``sys.stderr``.

    Returns:
        logging.Handler: The handler that was installed.
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    return handler
