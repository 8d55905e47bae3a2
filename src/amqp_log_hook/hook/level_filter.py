"""Decides which records reach the publishing hook."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from amqp_log_hook.levels import LogLevel


class LevelFilter(logging.Filter):
    """Passes records whose level is accepted and whose logger is not ignored.

    Both inputs are callables so changes to the hook configuration apply to the
    next record without reinstalling the filter.
    """

    def __init__(
        self,
        accepted_levels: Callable[[], Sequence[LogLevel]],
        ignored_loggers: Callable[[], Sequence[str]],
    ) -> None:
        super().__init__()
        self._accepted_levels = accepted_levels
        self._ignored_loggers = ignored_loggers

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._ignored_loggers():
            if record.name == name or record.name.startswith(name + "."):
                return False

        level = LogLevel.from_levelno(record.levelno)
        return level is not None and level in self._accepted_levels()
