"""Forwards records from the standard logging pipeline to a RabbitMQ queue."""

from .config import HookConfig, HookDependencies, Publishing, QueueDeclaration, new_hook_config
from .connection import RabbitMQConnection
from .contracts import ILogHook, IRabbitMQConnection
from .errors import (
    AMQPHookError,
    BrokerConnectionError,
    ChannelOpenError,
    EntrySerializationError,
    PublishError,
    QueueDeclareError,
)
from .formatting import JSONLogFormatter
from .hook import AMQPLogHandler, LevelFilter
from .levels import STANDARD_LEVELS, LogLevel

__all__ = [
    "AMQPHookError",
    "AMQPLogHandler",
    "BrokerConnectionError",
    "ChannelOpenError",
    "EntrySerializationError",
    "HookConfig",
    "HookDependencies",
    "ILogHook",
    "IRabbitMQConnection",
    "JSONLogFormatter",
    "LevelFilter",
    "LogLevel",
    "Publishing",
    "PublishError",
    "QueueDeclaration",
    "QueueDeclareError",
    "RabbitMQConnection",
    "STANDARD_LEVELS",
    "new_hook_config",
]
