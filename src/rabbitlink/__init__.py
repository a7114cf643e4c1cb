"""
rabbitlink - asyncio RabbitMQ client with distributed tracing.

This library provides:
- A single-connection aio-pika client for exchanges, queues and bindings
- Dead letter exchange and queue provisioning
- Publishing with W3C trace context carried in message headers
- Concurrent per-delivery consumers linked to the publisher's trace
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rabbitlink")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from rabbitlink.client import (
    MESSAGE_ID_HEADER,
    BrokerClient,
    RabbitMQClient,
    RabbitMQClientStats,
    build_queue_arguments,
    connect,
    get_death_count,
    get_death_info,
    get_first_death_exchange,
    get_first_death_queue,
    get_first_death_reason,
    get_original_routing_key,
    is_dead_lettered,
    retries_exhausted,
)
from rabbitlink.config import (
    DEFAULT_CONTENT_TYPE,
    ConsumeOptions,
    DLQOptions,
    DLXOptions,
    ExchangeKind,
    PublishOptions,
    QueueOptions,
    RabbitMQClientConfig,
)
from rabbitlink.exceptions import (
    AcknowledgmentError,
    BrokerConnectionError,
    CloseError,
    HandlerError,
    NotConnectedError,
    ProtocolError,
    RabbitLinkError,
    SerializationError,
)
from rabbitlink.handlers import MessageHandlerAdapter, get_handler_name
from rabbitlink.observability import (
    MessageHeadersCarrier,
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    SpanKindEnum,
    Tracer,
    create_tracer,
    default_propagator,
)
from rabbitlink.types import (
    Arguments,
    FlexibleMessageHandler,
    HeaderValue,
    Headers,
    MessageHandler,
    MessageHandlerFunc,
)

__all__ = [
    "__version__",
    # Client
    "BrokerClient",
    "RabbitMQClient",
    "RabbitMQClientStats",
    "MESSAGE_ID_HEADER",
    "build_queue_arguments",
    "connect",
    # Configuration
    "DEFAULT_CONTENT_TYPE",
    "RabbitMQClientConfig",
    "ExchangeKind",
    "PublishOptions",
    "ConsumeOptions",
    "QueueOptions",
    "DLXOptions",
    "DLQOptions",
    # Exceptions
    "RabbitLinkError",
    "BrokerConnectionError",
    "NotConnectedError",
    "SerializationError",
    "ProtocolError",
    "AcknowledgmentError",
    "HandlerError",
    "CloseError",
    # Handlers
    "MessageHandlerAdapter",
    "get_handler_name",
    # Observability
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "SpanKindEnum",
    "create_tracer",
    "MessageHeadersCarrier",
    "default_propagator",
    # Dead letter inspection
    "get_death_count",
    "get_death_info",
    "get_first_death_exchange",
    "get_first_death_queue",
    "get_first_death_reason",
    "get_original_routing_key",
    "is_dead_lettered",
    "retries_exhausted",
    # Types
    "Arguments",
    "FlexibleMessageHandler",
    "HeaderValue",
    "Headers",
    "MessageHandler",
    "MessageHandlerFunc",
]
