"""
Integration tests for RabbitMQClient against a real broker.

These tests verify:
- Publish and consume round trip with manual acknowledgment
- Header and trace context propagation
- Requeue after handler failure
- Dead letter provisioning on an existing queue
- Exchange redeclaration semantics

Requirements:
- Docker must be running
- testcontainers package must be installed

Tests are automatically skipped if these requirements are not met.
"""

from __future__ import annotations

import asyncio
from typing import Any
from uuid import uuid4

import pytest
from opentelemetry.context import Context
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from rabbitlink import (
    ProtocolError,
    PublishOptions,
    QueueOptions,
    RabbitMQClient,
    RabbitMQClientConfig,
    get_death_count,
)
from rabbitlink.serialization import json_loads

from .conftest import skip_if_no_rabbitmq_infra

pytestmark = [
    pytest.mark.integration,
    pytest.mark.rabbitmq,
    skip_if_no_rabbitmq_infra,
]

RECEIVE_TIMEOUT = 10.0


def unique(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:8]}"


class TestPublishConsume:
    """Round trips through a topic exchange."""

    async def test_json_round_trip(self, rabbitmq_client: RabbitMQClient) -> None:
        exchange, queue = unique("orders"), unique("orders-q")
        await rabbitmq_client.declare_exchange(exchange, "topic", auto_delete=True)
        await rabbitmq_client.declare_queue(queue, durable=False, auto_delete=True)
        await rabbitmq_client.bind_queue(queue, "order.*", exchange)

        received: asyncio.Queue[Any] = asyncio.Queue()

        async def handler(context: Context, message: Any) -> None:
            await received.put(message)

        await rabbitmq_client.consume(queue, handler)
        await rabbitmq_client.publish_with_options(
            exchange,
            "order.created",
            {"orderId": "1"},
            PublishOptions(headers={"tenant": "acme"}, message_id="msg-1"),
        )

        message = await asyncio.wait_for(received.get(), timeout=RECEIVE_TIMEOUT)
        assert json_loads(message.body) == {"orderId": "1"}
        assert message.content_type == "application/json"
        assert message.message_id == "msg-1"
        assert message.routing_key == "order.created"
        assert message.headers["tenant"] == "acme"
        assert message.headers["x-message-id"] == "msg-1"
        assert "traceparent" in message.headers

    async def test_consumer_span_linked_to_publisher(
        self,
        rabbitmq_client: RabbitMQClient,
        span_exporter: InMemorySpanExporter,
    ) -> None:
        queue = unique("traced")
        await rabbitmq_client.declare_queue(queue, durable=False, auto_delete=True)
        handled = asyncio.Event()

        async def handler(context: Context, message: Any) -> None:
            handled.set()

        await rabbitmq_client.consume(queue, handler)
        await rabbitmq_client.publish("", queue, {"orderId": "2"})
        await asyncio.wait_for(handled.wait(), timeout=RECEIVE_TIMEOUT)
        # The span ends after the handler returns and the ack is sent
        for _ in range(50):
            names = [s.name for s in span_exporter.get_finished_spans()]
            if "rabbitmq.handle_message" in names:
                break
            await asyncio.sleep(0.05)

        spans = {s.name: s for s in span_exporter.get_finished_spans()}
        publish_span = spans["rabbitmq.publish"]
        consumer_span = spans["rabbitmq.handle_message"]
        assert consumer_span.parent is None
        assert consumer_span.links[0].context.span_id == publish_span.context.span_id

    async def test_failed_handler_requeues(self, rabbitmq_client: RabbitMQClient) -> None:
        queue = unique("retry")
        await rabbitmq_client.declare_queue(queue, durable=False, auto_delete=True)
        attempts: list[bool] = []
        done = asyncio.Event()

        async def handler(context: Context, message: Any) -> None:
            attempts.append(message.redelivered)
            if len(attempts) == 1:
                raise RuntimeError("transient failure")
            done.set()

        await rabbitmq_client.consume(queue, handler)
        await rabbitmq_client.publish("", queue, {"orderId": "3"})

        await asyncio.wait_for(done.wait(), timeout=RECEIVE_TIMEOUT)
        assert attempts == [False, True]
        assert rabbitmq_client.stats.handler_failures == 1


class TestTopology:
    """Topology declarations against the broker."""

    async def test_exchange_redeclare(self, rabbitmq_client: RabbitMQClient) -> None:
        exchange = unique("events")
        await rabbitmq_client.declare_exchange(exchange, "fanout", auto_delete=True)
        await rabbitmq_client.declare_exchange(exchange, "fanout", auto_delete=True)

    async def test_exchange_kind_conflict(self, rabbitmq_connection_url: str) -> None:
        exchange = unique("events")
        client = RabbitMQClient(RabbitMQClientConfig(url=rabbitmq_connection_url))
        await client.connect()
        try:
            await client.declare_exchange(exchange, "fanout", auto_delete=True)
            with pytest.raises(ProtocolError):
                await client.declare_exchange(exchange, "direct", auto_delete=True)
        finally:
            await client.close()

    async def test_setup_dlx_for_existing_queue(self, rabbitmq_client: RabbitMQClient) -> None:
        queue, dlx, dlq = unique("orders"), unique("orders-dlx"), unique("orders-dlq")
        await rabbitmq_client.declare_queue(queue)

        await rabbitmq_client.setup_dlx_for_queue(queue, dlx, dlq)

        # Rejected messages now flow to the DLQ
        dead: asyncio.Queue[Any] = asyncio.Queue()

        async def dlq_handler(context: Context, message: Any) -> None:
            await dead.put(message)

        async def reject(context: Context, message: Any) -> None:
            await message.reject(requeue=False)

        await rabbitmq_client.consume(dlq, dlq_handler)
        await rabbitmq_client.publish("", queue, {"orderId": "4"})
        tag = await rabbitmq_client.consume(queue, reject)

        message = await asyncio.wait_for(dead.get(), timeout=RECEIVE_TIMEOUT)
        assert get_death_count(message) == 1
        await rabbitmq_client.cancel_consumer(tag)

        # Redeclaring with the dead letter arguments is now accepted
        await rabbitmq_client.declare_queue_with_dlx(
            queue, QueueOptions(dlx_name=dlx, dlx_routing_key=dlq)
        )

    async def test_setup_dlx_for_absent_queue(self, rabbitmq_client: RabbitMQClient) -> None:
        queue, dlx, dlq = unique("fresh"), unique("fresh-dlx"), unique("fresh-dlq")

        await rabbitmq_client.setup_dlx_for_queue(queue, dlx, dlq)

        assert await rabbitmq_client.declare_queue_with_dlx(
            queue, QueueOptions(dlx_name=dlx, dlx_routing_key=dlq)
        ) == queue

