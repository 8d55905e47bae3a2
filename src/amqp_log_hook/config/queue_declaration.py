"""Provides queue declaration parameters for the log publishing hook."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class QueueDeclaration:
    """Encapsulates the options used to ensure the destination queue exists.

    ``arguments`` is passed to the broker untouched (``x-message-ttl``,
    ``x-queue-type`` and similar). ``no_wait`` is kept for completeness only: the
    blocking pika adapter always waits for ``Queue.DeclareOk``.
    """

    name: str
    durable: bool = False
    auto_delete: bool = False
    exclusive: bool = False
    no_wait: bool = False
    arguments: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Queue name must be a non-empty string.")

    def declare_kwargs(self) -> Dict[str, Any]:
        return {
            "queue": self.name,
            "durable": self.durable,
            "auto_delete": self.auto_delete,
            "exclusive": self.exclusive,
            "arguments": self.arguments,
        }
