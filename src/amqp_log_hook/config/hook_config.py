"""Top-level configuration of an `AMQPLogHandler`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple

from amqp_log_hook.levels import LogLevel

from .publishing import Publishing
from .queue_declaration import QueueDeclaration

DEFAULT_IGNORED_LOGGERS: Tuple[str, ...] = ("pika", "amqp_log_hook")


@dataclass
class HookConfig:
    """Everything the handler needs to forward records to a queue.

    An empty ``levels`` sequence accepts every standard level. Records from
    ``ignored_loggers`` (and their children) are never forwarded, so the broker
    client's own logging cannot feed back into the handler.
    """

    amqp_url: str
    queue_declaration: QueueDeclaration
    publishing: Publishing = field(default_factory=Publishing)
    levels: Sequence[LogLevel] = ()
    reuse_connection: bool = False
    ignored_loggers: Tuple[str, ...] = DEFAULT_IGNORED_LOGGERS


def new_hook_config(amqp_url: str, queue_name: str) -> HookConfig:
    """Build a config publishing to ``queue_name`` through the default exchange."""
    return HookConfig(
        amqp_url=amqp_url,
        queue_declaration=QueueDeclaration(name=queue_name),
        publishing=Publishing(routing_key=queue_name),
    )
