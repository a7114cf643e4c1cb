"""Library exceptions for the rabbitlink package."""


class RabbitLinkError(Exception):
    """Base exception for rabbitlink library."""

    pass


class BrokerConnectionError(RabbitLinkError):
    """Raised when the broker cannot be dialed or a channel cannot be opened.

    Fatal to the client instance. The client does not retry; reconnection
    policy belongs to the caller.
    """

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(f"Failed to connect to RabbitMQ at {url}: {message}")


class NotConnectedError(RabbitLinkError):
    """Raised when an operation is attempted on a client with no open channel."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot {operation}: client is not connected")


class SerializationError(RabbitLinkError):
    """Raised when a payload cannot be encoded for publishing.

    No broker contact is made when this is raised.
    """

    def __init__(self, payload_type: str, message: str) -> None:
        self.payload_type = payload_type
        super().__init__(f"Serialization error for {payload_type}: {message}")


class ProtocolError(RabbitLinkError):
    """Raised when the broker rejects a declare, bind, publish or consume call."""

    def __init__(self, operation: str, target: str, message: str) -> None:
        self.operation = operation
        self.target = target
        super().__init__(f"RabbitMQ {operation} failed for '{target}': {message}")


class AcknowledgmentError(RabbitLinkError):
    """Raised when an ack or nack call itself fails.

    Never propagates out of the consume loop; it is logged and counted.
    """

    def __init__(self, operation: str, message_id: str | None, message: str) -> None:
        self.operation = operation
        self.message_id = message_id
        super().__init__(f"Failed to {operation} message {message_id}: {message}")


class HandlerError(RabbitLinkError):
    """Wraps an exception raised by a caller-supplied message handler.

    Triggers reject-and-requeue for the delivery and is recorded on the
    consumer span. It is contained within the delivery's handling task.
    """

    def __init__(self, queue: str, message_id: str | None, handler_name: str) -> None:
        self.queue = queue
        self.message_id = message_id
        self.handler_name = handler_name
        super().__init__(
            f"Handler {handler_name} failed for message {message_id} from queue {queue}"
        )


class CloseError(RabbitLinkError):
    """Raised when closing the channel and/or connection fails.

    Both resources are always closed; every failure is collected here.

    Attributes:
        errors: Exceptions raised while closing, in close order
            (channel first, then connection).
    """

    def __init__(self, errors: list[BaseException]) -> None:
        self.errors = errors
        details = "; ".join(f"{type(e).__name__}: {e}" for e in errors)
        super().__init__(f"Errors closing RabbitMQ client: {details}")


__all__ = [
    "AcknowledgmentError",
    "BrokerConnectionError",
    "CloseError",
    "HandlerError",
    "NotConnectedError",
    "ProtocolError",
    "RabbitLinkError",
    "SerializationError",
]
