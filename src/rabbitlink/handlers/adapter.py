"""
Handler adapter for normalizing message handlers.

Consumers accept handlers in several shapes: async functions, plain
functions, and objects exposing a ``handle(context, message)`` method
(sync or async). MessageHandlerAdapter turns all of them into a single
``async handle(context, message)`` call.
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from aio_pika.abc import AbstractIncomingMessage
from opentelemetry.context import Context

AsyncMessageHandlerFunc = Callable[[Context, AbstractIncomingMessage], Awaitable[None]]


def get_handler_name(handler: Any) -> str:
    """
    Get a descriptive name for a handler for logging and span attributes.

    Args:
        handler: Any handler object (class instance, function, lambda, partial)

    Returns:
        String name for the handler
    """
    name = getattr(handler, "__qualname__", None) or getattr(handler, "__name__", None)
    if name:
        return str(name)
    func = getattr(handler, "func", None)
    if func is not None:
        return get_handler_name(func)
    return type(handler).__name__


def _wrap_sync(func: Callable[..., Any]) -> AsyncMessageHandlerFunc:
    async def async_wrapper(context: Context, message: AbstractIncomingMessage) -> None:
        result = func(context, message)
        # A sync-looking callable may still hand back an awaitable
        if inspect.isawaitable(result):
            await result

    return async_wrapper


class MessageHandlerAdapter:
    """
    Adapter that normalizes message handlers to a consistent async interface.

    Example:
        >>> async def on_order(context, message):
        ...     print(message.body)
        >>> adapter = MessageHandlerAdapter(on_order)
        >>> await adapter.handle(context, message)

        >>> class AuditHandler:
        ...     def handle(self, context, message):
        ...         audit_log.append(message.message_id)
        >>> adapter = MessageHandlerAdapter(AuditHandler())

    Attributes:
        original: The original unwrapped handler
        name: Descriptive name for logging
    """

    def __init__(self, handler: Any) -> None:
        """
        Initialize the adapter with a handler.

        Raises:
            TypeError: If handler has no handle() method and isn't callable
        """
        self._original = handler
        self._async_handler = self._normalize(handler)
        self._name = get_handler_name(handler)

    @staticmethod
    def _normalize(handler: Any) -> AsyncMessageHandlerFunc:
        if hasattr(handler, "handle"):
            method = handler.handle
            if inspect.iscoroutinefunction(method):
                return method  # type: ignore[no-any-return]
            return _wrap_sync(method)

        if callable(handler):
            if inspect.iscoroutinefunction(handler):
                return handler  # type: ignore[no-any-return]
            return _wrap_sync(handler)

        raise TypeError(
            f"Handler must have a handle() method or be callable, got {type(handler)}"
        )

    @property
    def original(self) -> Any:
        """Get the original unwrapped handler."""
        return self._original

    @property
    def name(self) -> str:
        """Get the handler's descriptive name."""
        return self._name

    async def handle(self, context: Context, message: AbstractIncomingMessage) -> None:
        """
        Invoke the handler for one delivery.

        Exceptions raised by the handler propagate unchanged.
        """
        await self._async_handler(context, message)

    def __repr__(self) -> str:
        return f"MessageHandlerAdapter({self._name})"


__all__ = [
    "AsyncMessageHandlerFunc",
    "MessageHandlerAdapter",
    "get_handler_name",
]
