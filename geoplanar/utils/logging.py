"""Logging utility for geoplanar"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set

LOGGER = logging.getLogger('geoplanar')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS: Set[str] = set()


def warn_once(warning: str) -> None:
    """
    Log a warning on the package logger, unless the identical message has
    already been logged by this process.

    Args:
        warning: (str)
            The warning message
    """
    if warning in _WARNINGS:
        return

    LOGGER.warning(warning)
    _WARNINGS.add(warning)
