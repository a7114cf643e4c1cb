"""
OpenTelemetry metric instruments for the RabbitMQ client.

Instruments are created once from an explicitly supplied MeterProvider.
When no provider is given the client records no metrics at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from opentelemetry.metrics import Meter, MeterProvider

METER_NAME = "rabbitlink"


class RabbitMQClientMetrics:
    """Container for RabbitMQ client OpenTelemetry metric instruments.

    Attributes:
        messages_published: Counter for messages sent.
            Attributes: messaging.system, rabbitmq.exchange, rabbitmq.routing_key
        messages_consumed: Counter for deliveries received.
            Attributes: messaging.system, rabbitmq.queue
        publish_errors: Counter for failed publishes (encoding or broker).
            Attributes: rabbitmq.exchange, error.type
        handler_errors: Counter for handler failures.
            Attributes: rabbitmq.queue, rabbitlink.handler.name, error.type
        ack_errors: Counter for failed ack/nack calls.
            Attributes: rabbitmq.queue, rabbitmq.operation
        message_size: Histogram of published body sizes in bytes.
            Attributes: rabbitmq.exchange
        handler_duration: Histogram for handler execution time in ms.
            Attributes: rabbitmq.queue, rabbitlink.handler.name

    Example:
        >>> from opentelemetry.sdk.metrics import MeterProvider
        >>> metrics = RabbitMQClientMetrics(MeterProvider().get_meter("rabbitlink"))
        >>> metrics.messages_published.add(1, {"rabbitmq.exchange": "orders"})
    """

    def __init__(self, meter: Meter) -> None:
        """Initialize metric instruments.

        Args:
            meter: OpenTelemetry meter instance for creating instruments.
        """
        # Counters
        self.messages_published = meter.create_counter(
            name="rabbitmq.client.messages.published",
            description="Total messages published",
            unit="messages",
        )
        self.messages_consumed = meter.create_counter(
            name="rabbitmq.client.messages.consumed",
            description="Total deliveries received by consumers",
            unit="messages",
        )
        self.publish_errors = meter.create_counter(
            name="rabbitmq.client.publish.errors",
            description="Total publish failures",
            unit="errors",
        )
        self.handler_errors = meter.create_counter(
            name="rabbitmq.client.handler.errors",
            description="Total message handler failures",
            unit="errors",
        )
        self.ack_errors = meter.create_counter(
            name="rabbitmq.client.ack.errors",
            description="Total failed acknowledgments",
            unit="errors",
        )

        # Histograms
        self.message_size = meter.create_histogram(
            name="rabbitmq.client.message.size",
            description="Size of published message bodies",
            unit="By",
        )
        self.handler_duration = meter.create_histogram(
            name="rabbitmq.client.handler.duration",
            description="Time spent in message handlers",
            unit="ms",
        )


def create_metrics(
    meter_provider: MeterProvider | None,
    enable_metrics: bool = True,
) -> RabbitMQClientMetrics | None:
    """Create metric instruments, or None when metrics are disabled or no provider is given."""
    if not enable_metrics or meter_provider is None:
        return None
    return RabbitMQClientMetrics(meter_provider.get_meter(METER_NAME))


__all__ = [
    "METER_NAME",
    "RabbitMQClientMetrics",
    "create_metrics",
]
