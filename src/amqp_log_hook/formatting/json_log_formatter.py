"""Renders log records as JSON documents."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from amqp_log_hook.levels import LogLevel

_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JSONLogFormatter(logging.Formatter):
    """Formats a record as one JSON object, carrying ``extra=`` fields along.

    Pair with ``Publishing(content_type="application/json")``.
    """

    def format(self, record: logging.LogRecord) -> str:
        level = LogLevel.from_levelno(record.levelno)
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": level.name.lower() if level is not None else record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                entry[key] = value

        return json.dumps(entry, default=str)
