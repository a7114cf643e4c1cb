"""Broker clients for the rabbitlink library.

Available Implementations:
- RabbitMQClient: aio-pika client with tracing, dead-letter topology and
  per-delivery concurrent handling

Example:
    >>> from rabbitlink.client import RabbitMQClient
    >>> from rabbitlink.config import QueueOptions
    >>>
    >>> async with RabbitMQClient() as client:
    ...     await client.declare_dlx("orders-dlx")
    ...     await client.declare_dlq("orders-dlq", "orders-dlx")
    ...     await client.declare_queue_with_dlx(
    ...         "orders",
    ...         QueueOptions(dlx_name="orders-dlx", dlx_routing_key="orders-dlq"),
    ...     )
"""

from rabbitlink.client.deadletter import (
    get_death_count,
    get_death_info,
    get_first_death_exchange,
    get_first_death_queue,
    get_first_death_reason,
    get_original_routing_key,
    is_dead_lettered,
    retries_exhausted,
)
from rabbitlink.client.interface import BrokerClient
from rabbitlink.client.rabbitmq import (
    MESSAGE_ID_HEADER,
    RabbitMQClient,
    RabbitMQClientStats,
    build_queue_arguments,
    connect,
)

__all__ = [
    "BrokerClient",
    "MESSAGE_ID_HEADER",
    "RabbitMQClient",
    "RabbitMQClientStats",
    "build_queue_arguments",
    "connect",
    # Dead letter inspection
    "get_death_count",
    "get_death_info",
    "get_first_death_exchange",
    "get_first_death_queue",
    "get_first_death_reason",
    "get_original_routing_key",
    "is_dead_lettered",
    "retries_exhausted",
]
