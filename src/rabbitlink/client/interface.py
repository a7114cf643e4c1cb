"""Broker client interface definitions.

This module contains the BrokerClient abstract base class: the connection
lifecycle, topology, publish and consume operations a broker client
provides. RabbitMQClient is the aio-pika implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from rabbitlink.config import (
    ConsumeOptions,
    DLQOptions,
    DLXOptions,
    ExchangeKind,
    PublishOptions,
    QueueOptions,
)
from rabbitlink.types import Arguments, MessageHandler


class BrokerClient(ABC):
    """
    Abstract client for an AMQP 0-9-1 message broker.

    Tracing Support:
        Implementations SHOULD use the composition-based ``Tracer`` from
        ``rabbitlink.observability``:

        1. **Inject the tracer provider explicitly:**
           ``self._tracer = create_tracer(__name__, tracer_provider, enable_tracing)``

        2. **Name spans after the operation:**
           ``rabbitmq.declare_exchange``, ``rabbitmq.publish``,
           ``rabbitmq.handle_message`` and so on.

        3. **Propagate trace context through message headers:**
           inject on publish, extract on delivery, and link the consumer
           span to the publisher span instead of parenting it.

    Example:
        >>> async with RabbitMQClient(config) as client:
        ...     await client.declare_exchange("orders", "topic")
        ...     await client.publish("orders", "order.created", {"orderId": "1"})
    """

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """
        Open the connection and the shared channel.

        Raises:
            BrokerConnectionError: If the broker is unreachable or the
                channel cannot be opened. Nothing is left open.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """
        Stop consumers and release the channel and connection.

        Raises:
            CloseError: If closing the channel or the connection failed.
        """
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """True while the connection and the shared channel are open."""
        pass

    # =========================================================================
    # Topology
    # =========================================================================

    @abstractmethod
    async def declare_exchange(
        self,
        name: str,
        kind: ExchangeKind | str,
        *,
        durable: bool = True,
        auto_delete: bool = False,
        internal: bool = False,
        no_wait: bool = False,
        arguments: Arguments | None = None,
        timeout: float | None = None,
    ) -> None:
        """Declare an exchange. Idempotent for identical arguments."""
        pass

    @abstractmethod
    async def declare_queue(
        self,
        name: str,
        *,
        durable: bool = True,
        auto_delete: bool = False,
        exclusive: bool = False,
        no_wait: bool = False,
        arguments: Arguments | None = None,
        timeout: float | None = None,
    ) -> str:
        """Declare a queue and return its name (broker-assigned when name is empty)."""
        pass

    @abstractmethod
    async def declare_queue_with_dlx(self, name: str, options: QueueOptions) -> str:
        """Declare a queue with dead-letter and limit arguments."""
        pass

    @abstractmethod
    async def declare_dlx(self, name: str, options: DLXOptions | None = None) -> None:
        """Declare a dead letter exchange."""
        pass

    @abstractmethod
    async def declare_dlq(
        self,
        name: str,
        dlx_name: str,
        options: DLQOptions | None = None,
    ) -> None:
        """Declare a dead letter queue and bind it to the dead letter exchange."""
        pass

    @abstractmethod
    async def bind_queue(
        self,
        queue: str,
        routing_key: str,
        exchange: str,
        *,
        no_wait: bool = False,
        arguments: Arguments | None = None,
        timeout: float | None = None,
    ) -> None:
        """Bind a queue to an exchange."""
        pass

    @abstractmethod
    async def setup_dlx_for_queue(
        self,
        queue: str,
        dlx_name: str,
        dlq_name: str,
        options: DLXOptions | None = None,
    ) -> None:
        """
        Provision a DLX and DLQ and attach them to a queue.

        Warning:
            An existing queue is deleted and re-declared, losing any
            messages it holds.
        """
        pass

    # =========================================================================
    # Messaging
    # =========================================================================

    @abstractmethod
    async def publish(self, exchange: str, routing_key: str, message: Any) -> None:
        """Publish a message with default options."""
        pass

    @abstractmethod
    async def publish_with_options(
        self,
        exchange: str,
        routing_key: str,
        message: Any,
        options: PublishOptions,
    ) -> None:
        """Publish a message with explicit properties and flags."""
        pass

    @abstractmethod
    async def consume(self, queue: str, handler: MessageHandler) -> str:
        """Start consuming with manual acknowledgment. Returns the consumer tag."""
        pass

    @abstractmethod
    async def consume_with_options(
        self,
        queue: str,
        handler: MessageHandler,
        options: ConsumeOptions,
    ) -> str:
        """Start consuming with explicit consumer settings. Returns the consumer tag."""
        pass

    async def __aenter__(self) -> BrokerClient:
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


__all__ = ["BrokerClient"]
