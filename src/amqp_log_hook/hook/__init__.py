"""Logging handler publishing records to RabbitMQ."""

from .amqp_log_handler import AMQPLogHandler
from .level_filter import LevelFilter

__all__ = ["AMQPLogHandler", "LevelFilter"]
