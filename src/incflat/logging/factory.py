from __future__ import annotations

import logging
from typing import Optional, TextIO

from incflat.logging.helpers import setup_base_logger, get_logger


class DefaultLoggerFactory:
    """Hands out ``incflat.*`` loggers, configuring the base logger on first use.

    Only entry points build a factory; library modules call `get_logger`
    from the helpers directly and never touch handlers.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream = stream
        self._base: Optional[logging.Logger] = None

    @classmethod
    def for_verbosity(cls, *, verbose: bool = False, quiet: bool = False, json_logs: bool = False) -> "DefaultLoggerFactory":
        """Map the CLI's ``-v`` / ``-q`` switches onto a base level."""
        if verbose:
            level = logging.DEBUG
        elif quiet:
            level = logging.ERROR
        else:
            level = logging.INFO
        return cls(json_logs=json_logs, level=level)

    @property
    def level(self) -> int:
        return self._level

    def get_logger(self, name: str) -> logging.Logger:
        if self._base is None:
            self._base = setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        return get_logger(name)
