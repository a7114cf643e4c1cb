"""
Standard span and metric attributes for rabbitlink.

This module defines attribute constants used across the client for
consistent span naming and metrics labeling. Messaging attributes follow
OpenTelemetry semantic conventions; broker-specific ones use the
``rabbitmq.`` prefix.

Example:
    >>> from rabbitlink.observability.attributes import (
    ...     ATTR_EXCHANGE,
    ...     ATTR_ROUTING_KEY,
    ... )
    >>>
    >>> span = tracer.start_span(
    ...     "rabbitmq.publish",
    ...     attributes={ATTR_EXCHANGE: "orders", ATTR_ROUTING_KEY: "order.created"},
    ... )
"""

# =============================================================================
# Messaging Attributes (OpenTelemetry Semantic Conventions)
# =============================================================================

ATTR_MESSAGING_SYSTEM = "messaging.system"
"""Messaging system identifier (always 'rabbitmq')."""

ATTR_MESSAGING_DESTINATION = "messaging.destination"
"""Destination exchange or queue name."""

ATTR_MESSAGING_OPERATION = "messaging.operation"
"""Messaging operation type (e.g., 'publish', 'process')."""

ATTR_MESSAGING_MESSAGE_ID = "messaging.message_id"
"""Message id of a delivery. Used on consumer-to-publisher span links."""

ATTR_MESSAGING_ROUTING_KEY = "messaging.routing_key"
"""Routing key of a delivery. Used on consumer-to-publisher span links."""

ATTR_MESSAGING_EXCHANGE = "messaging.exchange"
"""Exchange a delivery was published to. Used on consumer-to-publisher span links."""

# =============================================================================
# RabbitMQ Operation Attributes
# =============================================================================

ATTR_OPERATION = "rabbitmq.operation"
"""Client operation name (e.g., 'declare_queue', 'publish')."""

ATTR_EXCHANGE = "rabbitmq.exchange"
"""Exchange name (string)."""

ATTR_EXCHANGE_KIND = "rabbitmq.kind"
"""Exchange type: direct, topic, fanout or headers."""

ATTR_QUEUE = "rabbitmq.queue"
"""Queue name (string)."""

ATTR_ROUTING_KEY = "rabbitmq.routing_key"
"""Routing or binding key (string)."""

ATTR_MESSAGE_ID = "rabbitmq.message_id"
"""Message id (string)."""

ATTR_MESSAGE_SIZE = "rabbitmq.message_size"
"""Body size in bytes (integer)."""

ATTR_CONSUMER_TAG = "rabbitmq.consumer"
"""Consumer tag (string)."""

ATTR_AUTO_ACK = "rabbitmq.auto_ack"
"""Whether the consumer runs in auto-acknowledge mode (boolean)."""

ATTR_DURABLE = "rabbitmq.durable"
"""Whether the declared entity is durable (boolean)."""

ATTR_AUTO_DELETE = "rabbitmq.auto_delete"
"""Whether the declared entity is auto-deleted (boolean)."""

ATTR_EXCLUSIVE = "rabbitmq.exclusive"
"""Whether the declared queue is exclusive (boolean)."""

ATTR_INTERNAL = "rabbitmq.internal"
"""Whether the declared exchange is internal (boolean)."""

# =============================================================================
# Dead Letter Attributes
# =============================================================================

ATTR_DLX = "rabbitmq.dlx"
"""Dead letter exchange name (string)."""

ATTR_DLX_ROUTING_KEY = "rabbitmq.dlx_routing_key"
"""Routing key used for dead-lettered messages (string)."""

ATTR_DLQ = "rabbitmq.dlq"
"""Dead letter queue name (string)."""

ATTR_MESSAGE_TTL = "rabbitmq.message_ttl"
"""Queue message TTL in milliseconds (integer)."""

ATTR_MAX_LENGTH = "rabbitmq.max_length"
"""Maximum queue length (integer)."""

ATTR_MAX_PRIORITY = "rabbitmq.max_priority"
"""Maximum queue priority (integer)."""

ATTR_MAX_RETRIES = "rabbitmq.max_retries"
"""Value of the custom x-max-retries marker (integer)."""

ATTR_QUEUE_RECREATED = "rabbitmq.queue_recreated"
"""Whether an existing queue was deleted and recreated (boolean)."""

# =============================================================================
# Handler and Error Attributes
# =============================================================================

ATTR_HANDLER_NAME = "rabbitlink.handler.name"
"""Name of the message handler being invoked (string)."""

ATTR_HANDLER_SUCCESS = "rabbitlink.handler.success"
"""Whether the handler executed successfully (boolean)."""

ATTR_ERROR_TYPE = "error.type"
"""Type of error encountered (exception class name)."""

# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    # Messaging (OTEL semantic)
    "ATTR_MESSAGING_SYSTEM",
    "ATTR_MESSAGING_DESTINATION",
    "ATTR_MESSAGING_OPERATION",
    "ATTR_MESSAGING_MESSAGE_ID",
    "ATTR_MESSAGING_ROUTING_KEY",
    "ATTR_MESSAGING_EXCHANGE",
    # RabbitMQ operations
    "ATTR_OPERATION",
    "ATTR_EXCHANGE",
    "ATTR_EXCHANGE_KIND",
    "ATTR_QUEUE",
    "ATTR_ROUTING_KEY",
    "ATTR_MESSAGE_ID",
    "ATTR_MESSAGE_SIZE",
    "ATTR_CONSUMER_TAG",
    "ATTR_AUTO_ACK",
    "ATTR_DURABLE",
    "ATTR_AUTO_DELETE",
    "ATTR_EXCLUSIVE",
    "ATTR_INTERNAL",
    # Dead letter
    "ATTR_DLX",
    "ATTR_DLX_ROUTING_KEY",
    "ATTR_DLQ",
    "ATTR_MESSAGE_TTL",
    "ATTR_MAX_LENGTH",
    "ATTR_MAX_PRIORITY",
    "ATTR_MAX_RETRIES",
    "ATTR_QUEUE_RECREATED",
    # Handler/Error
    "ATTR_HANDLER_NAME",
    "ATTR_HANDLER_SUCCESS",
    "ATTR_ERROR_TYPE",
]
