"""Unit tests for dead-letter header inspection helpers."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

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


def make_delivery(headers: dict[str, Any] | None) -> MagicMock:
    message = MagicMock()
    message.headers = headers
    return message


@pytest.fixture
def dead_lettered() -> MagicMock:
    return make_delivery(
        {
            "x-death": [
                {
                    "count": 2,
                    "reason": "rejected",
                    "queue": "orders",
                    "exchange": "orders",
                    "routing-keys": [b"order.created"],
                },
                {
                    "count": 1,
                    "reason": "expired",
                    "queue": "orders.retry",
                    "exchange": "",
                    "routing-keys": ["orders.retry"],
                },
            ],
            "x-first-death-queue": "orders",
            "x-first-death-reason": b"rejected",
            "x-first-death-exchange": "orders",
        }
    )


class TestDeathHelpers:
    def test_death_count_sums_records(self, dead_lettered: MagicMock) -> None:
        assert get_death_count(dead_lettered) == 3

    def test_first_death_headers(self, dead_lettered: MagicMock) -> None:
        assert get_first_death_queue(dead_lettered) == "orders"
        assert get_first_death_reason(dead_lettered) == "rejected"
        assert get_first_death_exchange(dead_lettered) == "orders"

    def test_original_routing_key_decodes_bytes(self, dead_lettered: MagicMock) -> None:
        assert get_original_routing_key(dead_lettered) == "order.created"

    def test_is_dead_lettered(self, dead_lettered: MagicMock) -> None:
        assert is_dead_lettered(dead_lettered) is True

    @pytest.mark.parametrize("headers", [None, {}, {"x-death": "not-a-list"}])
    def test_fresh_message(self, headers: dict[str, Any] | None) -> None:
        message = make_delivery(headers)

        assert get_death_count(message) == 0
        assert is_dead_lettered(message) is False
        assert get_original_routing_key(message) is None
        assert get_first_death_queue(message) is None

    def test_ignores_malformed_counts(self) -> None:
        message = make_delivery({"x-death": [{"count": "3"}, {"count": True}, {"count": 4}]})

        assert get_death_count(message) == 4


class TestRetriesExhausted:
    @pytest.mark.parametrize(("max_retries", "expected"), [(2, True), (3, True), (4, False)])
    def test_against_cap(self, dead_lettered: MagicMock, max_retries: int, expected: bool) -> None:
        assert retries_exhausted(dead_lettered, max_retries) is expected

    @pytest.mark.parametrize("max_retries", [0, -1])
    def test_no_cap(self, dead_lettered: MagicMock, max_retries: int) -> None:
        assert retries_exhausted(dead_lettered, max_retries) is False


class TestGetDeathInfo:
    def test_collects_everything(self, dead_lettered: MagicMock) -> None:
        info = get_death_info(dead_lettered)

        assert info["is_dead_lettered"] is True
        assert info["death_count"] == 3
        assert info["first_death_queue"] == "orders"
        assert info["first_death_reason"] == "rejected"
        assert info["first_death_exchange"] == "orders"
        assert info["original_routing_key"] == "order.created"
        assert len(info["x_death"]) == 2
