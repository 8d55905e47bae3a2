"""Provides delivery options for published log entries."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import pika

DEFAULT_CONTENT_TYPE = "text/plain"


@dataclass(frozen=True)
class Publishing:
    """Destination and envelope settings applied to every published entry.

    The message body is not part of the settings; it is rendered for each
    record. An empty ``content_type`` falls back to ``text/plain``.
    """

    exchange: str = ""
    routing_key: str = ""
    mandatory: bool = False
    immediate: bool = False
    content_type: str = DEFAULT_CONTENT_TYPE
    content_encoding: str = "utf-8"
    headers: Optional[Dict[str, Any]] = None
    delivery_mode: Optional[int] = None
    priority: Optional[int] = None
    expiration: Optional[str] = None
    app_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.immediate:
            raise ValueError("The immediate flag is not supported by RabbitMQ.")
        if not self.content_type:
            object.__setattr__(self, "content_type", DEFAULT_CONTENT_TYPE)

    def properties(self) -> pika.BasicProperties:
        return pika.BasicProperties(
            content_type=self.content_type,
            content_encoding=self.content_encoding,
            headers=self.headers,
            delivery_mode=self.delivery_mode,
            priority=self.priority,
            expiration=self.expiration,
            app_id=self.app_id,
        )
