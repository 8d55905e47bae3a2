"""Severity levels a hook can subscribe to."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict, Optional, Tuple


class LogLevel(IntEnum):
    """Standard severities, valued on the stdlib ``logging`` scale."""

    PANIC = 60
    FATAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARN = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG

    @classmethod
    def parse(cls, name: str) -> LogLevel:
        key = name.strip().lower()
        try:
            return _NAMES[key]
        except KeyError:
            raise ValueError(f"not a valid log level: {name!r}") from None

    @classmethod
    def from_levelno(cls, levelno: int) -> Optional[LogLevel]:
        """Return the most severe level not above ``levelno``, or ``None`` below DEBUG."""
        for level in STANDARD_LEVELS:
            if levelno >= level:
                return level
        return None


STANDARD_LEVELS: Tuple[LogLevel, ...] = (
    LogLevel.PANIC,
    LogLevel.FATAL,
    LogLevel.ERROR,
    LogLevel.WARN,
    LogLevel.INFO,
    LogLevel.DEBUG,
)

_NAMES: Dict[str, LogLevel] = {level.name.lower(): level for level in LogLevel}
_NAMES.update({"warning": LogLevel.WARN, "critical": LogLevel.FATAL})
