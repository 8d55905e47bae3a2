"""RabbitMQ connection management."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional, Type

import pika
from pika.adapters.blocking_connection import BlockingChannel, BlockingConnection
from pika.connection import Parameters

from amqp_log_hook.contracts import IRabbitMQConnection
from amqp_log_hook.errors import BrokerConnectionError, ChannelOpenError


class RabbitMQConnection(IRabbitMQConnection):
    """Manages lifecycle of a blocking RabbitMQ connection."""

    def __init__(self, rabbitmq_url: str) -> None:
        url = (rabbitmq_url or "").strip()
        if not url:
            raise BrokerConnectionError(url, ValueError("RabbitMQ URL must be provided."))

        try:
            self._parameters: Parameters = pika.URLParameters(url)
        except ValueError as exc:
            raise BrokerConnectionError(url, exc) from exc

        self.rabbitmq_url = url
        self.connection: Optional[BlockingConnection] = None
        self.channel: Optional[BlockingChannel] = None
        self.logger = logging.getLogger(__name__)

    def connect(self) -> BlockingChannel:
        if self.connection is None or self.connection.is_closed:
            self.logger.debug("Connecting to RabbitMQ at %s", self.rabbitmq_url)
            try:
                self.connection = pika.BlockingConnection(self._parameters)
            except Exception as exc:
                self.logger.debug("Failed to establish RabbitMQ connection: %s", exc)
                raise BrokerConnectionError(self.rabbitmq_url, exc) from exc
            self.channel = None

        if self.channel is None or self.channel.is_closed:
            try:
                self.channel = self.connection.channel()
            except Exception as exc:
                self.logger.debug("Failed to open RabbitMQ channel: %s", exc)
                raise ChannelOpenError(exc) from exc

        return self.channel

    def close(self) -> None:
        if self.channel is not None and not self.channel.is_closed:
            try:
                self.channel.close()
            except Exception as exc:
                self.logger.warning("Failed to close RabbitMQ channel: %s", exc)
            else:
                self.logger.debug("Closed RabbitMQ channel.")

        if self.connection is not None and not self.connection.is_closed:
            try:
                self.connection.close()
            except Exception as exc:
                self.logger.warning("Failed to close RabbitMQ connection: %s", exc)
            else:
                self.logger.debug("Closed RabbitMQ connection.")

    def __enter__(self) -> RabbitMQConnection:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()
