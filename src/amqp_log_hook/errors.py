"""Errors raised while forwarding a log record to RabbitMQ."""

from __future__ import annotations

from typing import Optional


class AMQPHookError(Exception):
    """Base class for failures of a single publish attempt."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class BrokerConnectionError(AMQPHookError):
    """The connection to the broker could not be established."""

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"failed to create a new connection to {url}", cause)
        self.url = url


class ChannelOpenError(AMQPHookError):
    """A channel could not be opened on an established connection."""

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__("failed to open a new server channel", cause)


class QueueDeclareError(AMQPHookError):
    """The destination queue could not be declared."""

    def __init__(self, queue_name: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"failed to declare the {queue_name} queue", cause)
        self.queue_name = queue_name


class EntrySerializationError(AMQPHookError):
    """The log record could not be rendered to text."""

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__("failed to render the log entry", cause)


class PublishError(AMQPHookError):
    """The rendered entry could not be handed to the broker."""

    def __init__(self, body: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"failed to publish the entry {body}", cause)
        self.body = body
