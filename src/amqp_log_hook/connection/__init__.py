"""RabbitMQ connection handling."""

from .rabbitmq_connection import RabbitMQConnection

__all__ = ["RabbitMQConnection"]
