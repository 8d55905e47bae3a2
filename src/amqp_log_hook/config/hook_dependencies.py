"""Factories used to wire an `AMQPLogHandler`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from amqp_log_hook.connection import RabbitMQConnection
from amqp_log_hook.contracts import IRabbitMQConnection


@dataclass(frozen=True)
class HookDependencies:
    """Bundles factory functions for handler wiring."""

    make_connection: Callable[[str], IRabbitMQConnection] = field(
        default=lambda amqp_url: RabbitMQConnection(amqp_url)
    )
    make_formatter: Callable[[], logging.Formatter] = field(default=logging.Formatter)
