"""
Observability utilities for rabbitlink.

This module provides the composition-based tracer, trace context
propagation through message headers, metric instruments, and standard
attribute definitions used across the client.

Example:
    >>> from opentelemetry.sdk.trace import TracerProvider
    >>> from rabbitlink.observability import create_tracer, default_propagator
    >>>
    >>> tracer = create_tracer(__name__, TracerProvider())
    >>> propagator = default_propagator()
"""

from rabbitlink.observability.attributes import (
    ATTR_AUTO_ACK,
    ATTR_AUTO_DELETE,
    ATTR_CONSUMER_TAG,
    ATTR_DLQ,
    ATTR_DLX,
    ATTR_DLX_ROUTING_KEY,
    ATTR_DURABLE,
    ATTR_ERROR_TYPE,
    ATTR_EXCHANGE,
    ATTR_EXCHANGE_KIND,
    ATTR_EXCLUSIVE,
    ATTR_HANDLER_NAME,
    ATTR_HANDLER_SUCCESS,
    ATTR_INTERNAL,
    ATTR_MAX_LENGTH,
    ATTR_MAX_PRIORITY,
    ATTR_MAX_RETRIES,
    ATTR_MESSAGE_ID,
    ATTR_MESSAGE_SIZE,
    ATTR_MESSAGE_TTL,
    ATTR_MESSAGING_DESTINATION,
    ATTR_MESSAGING_EXCHANGE,
    ATTR_MESSAGING_MESSAGE_ID,
    ATTR_MESSAGING_OPERATION,
    ATTR_MESSAGING_ROUTING_KEY,
    ATTR_MESSAGING_SYSTEM,
    ATTR_OPERATION,
    ATTR_QUEUE,
    ATTR_QUEUE_RECREATED,
    ATTR_ROUTING_KEY,
)
from rabbitlink.observability.metrics import (
    METER_NAME,
    RabbitMQClientMetrics,
    create_metrics,
)
from rabbitlink.observability.propagation import (
    MessageHeadersCarrier,
    carrier_getter,
    carrier_setter,
    default_propagator,
    extract_trace_context,
    inject_trace_context,
)
from rabbitlink.observability.tracer import (
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    SpanKindEnum,
    Tracer,
    create_tracer,
)

__all__ = [
    # Tracer (composition-based API)
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "SpanKindEnum",
    "create_tracer",
    # Propagation
    "MessageHeadersCarrier",
    "carrier_getter",
    "carrier_setter",
    "default_propagator",
    "extract_trace_context",
    "inject_trace_context",
    # Metrics
    "METER_NAME",
    "RabbitMQClientMetrics",
    "create_metrics",
    # Attributes - Messaging
    "ATTR_MESSAGING_SYSTEM",
    "ATTR_MESSAGING_DESTINATION",
    "ATTR_MESSAGING_OPERATION",
    "ATTR_MESSAGING_MESSAGE_ID",
    "ATTR_MESSAGING_ROUTING_KEY",
    "ATTR_MESSAGING_EXCHANGE",
    # Attributes - RabbitMQ
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
    # Attributes - Dead letter
    "ATTR_DLX",
    "ATTR_DLX_ROUTING_KEY",
    "ATTR_DLQ",
    "ATTR_MESSAGE_TTL",
    "ATTR_MAX_LENGTH",
    "ATTR_MAX_PRIORITY",
    "ATTR_MAX_RETRIES",
    "ATTR_QUEUE_RECREATED",
    # Attributes - Handler/Error
    "ATTR_HANDLER_NAME",
    "ATTR_HANDLER_SUCCESS",
    "ATTR_ERROR_TYPE",
]
