"""Logging handler that publishes every accepted record to a RabbitMQ queue."""

from __future__ import annotations

import logging
import threading
from typing import List, Optional, Sequence, Union

from pika.adapters.blocking_connection import BlockingChannel

from amqp_log_hook.config import HookConfig, HookDependencies, new_hook_config
from amqp_log_hook.contracts import ILogHook, IRabbitMQConnection
from amqp_log_hook.errors import (
    AMQPHookError,
    EntrySerializationError,
    PublishError,
    QueueDeclareError,
)
from amqp_log_hook.levels import STANDARD_LEVELS, LogLevel

from .level_filter import LevelFilter


class AMQPLogHandler(logging.Handler, ILogHook):
    """Forwards log records to RabbitMQ, one connection per record.

    Each accepted record opens a connection and a channel, declares the
    configured queue, publishes the formatted record and closes everything
    again. Set ``HookConfig.reuse_connection`` to keep a single connection open
    for the lifetime of the handler instead; records are then published one at
    a time under the handler lock.

    Failures are reported through :meth:`logging.Handler.handleError` and never
    propagate into the logging call. Use :meth:`fire` directly to get the
    ``AMQPHookError`` instead.
    """

    def __init__(
        self,
        config: HookConfig,
        *,
        dependencies: Optional[HookDependencies] = None,
        level: int = logging.NOTSET,
    ) -> None:
        super().__init__(level)
        deps = dependencies or HookDependencies()

        self.config = config
        self.logger = logging.getLogger(__name__)
        self._make_connection = deps.make_connection
        self._shared_connection: Optional[IRabbitMQConnection] = None
        self._local = threading.local()

        self.setFormatter(deps.make_formatter())
        self.addFilter(LevelFilter(self.accepted_levels, lambda: self.config.ignored_loggers))

        if config.queue_declaration.no_wait:
            self.logger.warning(
                "no_wait is ignored for queue %s: declarations always wait for the broker",
                config.queue_declaration.name,
            )

    @classmethod
    def from_url(
        cls,
        amqp_url: str,
        queue_name: str,
        *,
        levels: Optional[Sequence[Union[LogLevel, str]]] = None,
        dependencies: Optional[HookDependencies] = None,
    ) -> "AMQPLogHandler":
        config = new_hook_config(amqp_url, queue_name)
        if levels:
            config.levels = [
                LogLevel.parse(level) if isinstance(level, str) else LogLevel(level)
                for level in levels
            ]
        return cls(config, dependencies=dependencies)

    def accepted_levels(self) -> List[LogLevel]:
        if self.config.levels:
            return list(self.config.levels)
        return list(STANDARD_LEVELS)

    def emit(self, record: logging.LogRecord) -> None:
        # Records emitted while publishing on this thread would recurse.
        if getattr(self._local, "firing", False):
            return

        self._local.firing = True
        try:
            self.fire(record)
        except AMQPHookError as exc:
            self.logger.debug("Dropping log record from %s: %s", record.name, exc)
            self.handleError(record)
        except Exception:
            self.handleError(record)
        finally:
            self._local.firing = False

    def fire(self, record: logging.LogRecord) -> None:
        if self.config.reuse_connection:
            self._fire_shared(record)
            return

        connection = self._make_connection(self.config.amqp_url)
        try:
            self._publish(connection.connect(), record)
        finally:
            connection.close()

    def close(self) -> None:
        self.acquire()
        try:
            if self._shared_connection is not None:
                self._shared_connection.close()
                self._shared_connection = None
        finally:
            self.release()
        super().close()

    def _fire_shared(self, record: logging.LogRecord) -> None:
        self.acquire()
        try:
            connection = self._shared_connection
            if connection is None:
                connection = self._make_connection(self.config.amqp_url)
                self._shared_connection = connection
            try:
                self._publish(connection.connect(), record)
            except EntrySerializationError:
                raise
            except Exception:
                # Reconnect on the next record.
                connection.close()
                raise
        finally:
            self.release()

    def _publish(self, channel: BlockingChannel, record: logging.LogRecord) -> None:
        declaration = self.config.queue_declaration
        try:
            channel.queue_declare(**declaration.declare_kwargs())
        except Exception as exc:
            raise QueueDeclareError(declaration.name, exc) from exc

        try:
            text = self.format(record)
            body = text.encode("utf-8")
        except Exception as exc:
            raise EntrySerializationError(exc) from exc

        publishing = self.config.publishing
        try:
            channel.basic_publish(
                exchange=publishing.exchange,
                routing_key=publishing.routing_key,
                body=body,
                properties=publishing.properties(),
                mandatory=publishing.mandatory,
            )
        except Exception as exc:
            raise PublishError(text, exc) from exc
