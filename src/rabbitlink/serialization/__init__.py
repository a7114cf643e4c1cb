"""
Serialization utilities for rabbitlink.

This module encodes publish payloads into message bodies, with JSON
support for UUIDs, datetimes, decimals and pydantic models.

Example:
    >>> from rabbitlink.serialization import encode_payload
    >>>
    >>> body = encode_payload({"orderId": "1"})
"""

from rabbitlink.serialization.json import (
    RabbitLinkJSONEncoder,
    encode_payload,
    json_dumps,
    json_loads,
)

__all__ = [
    "RabbitLinkJSONEncoder",
    "encode_payload",
    "json_dumps",
    "json_loads",
]
