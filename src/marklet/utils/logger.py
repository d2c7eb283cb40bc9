"""Minimal logging utilities for marklet.

The library only creates loggers; configuring handlers is left to the host
(the command line does it for ``-v``).

Example:
    >>> from marklet.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("compiled %d tokens", 12)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "marklet"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under ``marklet``.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("preview").name
        'marklet.preview'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + ".")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
