"""Common type definitions for the rabbitlink library."""

from collections.abc import Awaitable, Callable
from datetime import datetime
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from aio_pika.abc import AbstractIncomingMessage
from opentelemetry.context import Context

# Values an AMQP field table can carry: long string, integers, boolean,
# binary, decimal, timestamp, nested table, array, void
HeaderValue = str | int | float | bool | bytes | Decimal | datetime | dict[str, Any] | list[Any] | None

Headers = dict[str, HeaderValue]

# Queue/exchange argument table
Arguments = dict[str, Any]

# Handler invoked once per delivery. Raising means failure (nack + requeue).
MessageHandlerFunc = Callable[[Context, AbstractIncomingMessage], Awaitable[None] | None]


@runtime_checkable
class FlexibleMessageHandler(Protocol):
    """
    Protocol for handler objects whose handle() may be sync or async.

    Consumers also accept a bare MessageHandlerFunc.
    """

    def handle(self, context: Context, message: AbstractIncomingMessage) -> Awaitable[None] | None:
        """Handle one delivery, returning an Awaitable if async."""
        ...


MessageHandler = FlexibleMessageHandler | MessageHandlerFunc
