"""
Helpers for inspecting dead-lettered deliveries.

When the broker dead-letters a message it records the history in the
``x-death`` header (a list of tables, one per queue/reason pair) and the
``x-first-death-*`` headers. The client only writes the ``x-max-retries``
queue marker; these helpers let a handler read the history and decide
when to stop requeueing.

Example:
    >>> from rabbitlink.client.deadletter import get_death_count, retries_exhausted
    >>>
    >>> async def handle(context, message):
    ...     if retries_exhausted(message, max_retries=3):
    ...         await park(message)
    ...         return
    ...     await process(message)
"""

from __future__ import annotations

from typing import Any

from aio_pika.abc import AbstractIncomingMessage


def _headers(message: AbstractIncomingMessage) -> dict[str, Any]:
    return message.headers or {}


def _death_records(message: AbstractIncomingMessage) -> list[dict[str, Any]]:
    x_death = _headers(message).get("x-death")
    if not isinstance(x_death, list):
        return []
    return [record for record in x_death if isinstance(record, dict)]


def _text_header(message: AbstractIncomingMessage, name: str) -> str | None:
    value = _headers(message).get(name)
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def get_death_count(message: AbstractIncomingMessage) -> int:
    """Total number of times the message was dead-lettered, summed over all records."""
    total = 0
    for record in _death_records(message):
        count = record.get("count", 0)
        if isinstance(count, int) and not isinstance(count, bool):
            total += count
    return total


def get_first_death_queue(message: AbstractIncomingMessage) -> str | None:
    """Queue the message was first dead-lettered from."""
    return _text_header(message, "x-first-death-queue")


def get_first_death_reason(message: AbstractIncomingMessage) -> str | None:
    """
    Reason for the first dead-lettering.

    One of ``rejected`` (nack/reject without requeue), ``expired`` (TTL),
    ``maxlen`` (queue length limit) or ``delivery_limit`` (quorum queues).
    """
    return _text_header(message, "x-first-death-reason")


def get_first_death_exchange(message: AbstractIncomingMessage) -> str | None:
    """Exchange the message was published to before it first died."""
    return _text_header(message, "x-first-death-exchange")


def get_original_routing_key(message: AbstractIncomingMessage) -> str | None:
    """Routing key of the message before dead-lettering, from the newest death record."""
    records = _death_records(message)
    if not records:
        return None
    routing_keys = records[0].get("routing-keys")
    if isinstance(routing_keys, list) and routing_keys:
        key = routing_keys[0]
        return key.decode("utf-8") if isinstance(key, bytes) else str(key)
    return None


def is_dead_lettered(message: AbstractIncomingMessage) -> bool:
    """True when the message carries at least one death record."""
    return bool(_death_records(message))


def retries_exhausted(message: AbstractIncomingMessage, max_retries: int) -> bool:
    """
    Check a delivery against a retry cap such as the queue's ``x-max-retries``.

    A cap of 0 or less means unlimited.
    """
    if max_retries <= 0:
        return False
    return get_death_count(message) >= max_retries


def get_death_info(message: AbstractIncomingMessage) -> dict[str, Any]:
    """
    Collect all dead-letter details of a delivery into one dict.

    Returns:
        Dictionary with is_dead_lettered, death_count, first_death_queue,
        first_death_reason, first_death_exchange, original_routing_key and
        the raw x_death records.
    """
    return {
        "is_dead_lettered": is_dead_lettered(message),
        "death_count": get_death_count(message),
        "first_death_queue": get_first_death_queue(message),
        "first_death_reason": get_first_death_reason(message),
        "first_death_exchange": get_first_death_exchange(message),
        "original_routing_key": get_original_routing_key(message),
        "x_death": _headers(message).get("x-death"),
    }


__all__ = [
    "get_death_count",
    "get_death_info",
    "get_first_death_exchange",
    "get_first_death_queue",
    "get_first_death_reason",
    "get_original_routing_key",
    "is_dead_lettered",
    "retries_exhausted",
]
