"""Message handler normalization for rabbitlink consumers."""

from rabbitlink.handlers.adapter import (
    AsyncMessageHandlerFunc,
    MessageHandlerAdapter,
    get_handler_name,
)

__all__ = [
    "AsyncMessageHandlerFunc",
    "MessageHandlerAdapter",
    "get_handler_name",
]
