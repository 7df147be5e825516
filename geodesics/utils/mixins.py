"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional, Set


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives each instance a logger named after its module and class, which
    nests it under the package logger so that the package's handler and
    level apply.

    Messages sent through warn_once are logged once per process, whichever
    instance or subclass sends them.
    """
    logger: logging.Logger

    WARNED_ONCE: Set[str] = set()

    def __init__(self, logstr: Optional[str] = None):
        _class = type(self)
        name = _class.__qualname__
        if logstr:
            name = f'{name}.{logstr}'

        if _class.__module__ != 'builtins':
            name = f'{_class.__module__}.{name}'

        self.logger = logging.getLogger(name)

    def warn_once(self, msg: str, *args, **kwargs):
        """Logs a warning, unless this message has been logged before"""
        if msg in LoggingMixin.WARNED_ONCE:
            return

        LoggingMixin.WARNED_ONCE.add(msg)
        self.logger.warning(msg, *args, **kwargs)
