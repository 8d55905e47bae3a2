"""Defines the contract for logging hooks that forward records elsewhere."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

from amqp_log_hook.levels import LogLevel


class ILogHook(ABC):
    """Forwards log records accepted by its level filter."""

    @abstractmethod
    def accepted_levels(self) -> List[LogLevel]:
        """Return the levels this hook should be fired for."""

    @abstractmethod
    def fire(self, record: logging.LogRecord) -> None:
        """Forward a single record, raising ``AMQPHookError`` on failure."""
