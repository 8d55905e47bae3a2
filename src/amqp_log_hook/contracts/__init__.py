"""Contract interfaces for the log publishing hook."""

from .log_hook_interface import ILogHook
from .rabbitmq_connection_interface import IRabbitMQConnection

__all__ = [
    "ILogHook",
    "IRabbitMQConnection",
]
