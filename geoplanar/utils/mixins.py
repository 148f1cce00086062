"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives a class its own logger, named after its module and class so that
    records propagate to the geoplanar package logger.
    """
    logger: logging.Logger

    WARNED_ONCE: set = set()

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        name = f'{_class.__module__}.{_class.__name__}'
        if logstr:
            name += f'.{logstr}'

        self.logger = logging.getLogger(name)

    @classmethod
    def _set_warned_once(cls, msg):
        """Appends message to classvar"""
        cls.WARNED_ONCE.add(msg)

    def warn_once(self, msg, *args, **kwargs):
        """Logs a warning only once per message"""
        if msg in self.WARNED_ONCE:
            return

        self.logger.warning(msg, *args, **kwargs)
        self._set_warned_once(msg)
