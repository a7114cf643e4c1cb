"""
JSON serialization utilities for message payloads.

This module turns arbitrary publish payloads into message bodies. Raw
bytes and strings pass through untouched; pydantic models use their own
JSON serializer; everything else is encoded as JSON with support for
common non-JSON-native types.

Example:
    >>> from rabbitlink.serialization import encode_payload, json_loads
    >>> from uuid import uuid4
    >>>
    >>> body = encode_payload({"order_id": uuid4()})
    >>> parsed = json_loads(body)
"""

import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from rabbitlink.exceptions import SerializationError


class RabbitLinkJSONEncoder(json.JSONEncoder):
    """
    Custom JSON encoder for message payloads.

    This encoder extends the standard JSONEncoder to support serialization of:
    - UUID objects: Converted to string representation
    - datetime and date objects: Converted to ISO 8601 format string
    - Decimal objects: Converted to string to preserve precision
    - Enum members: Converted to their value
    - set and frozenset: Converted to lists
    - pydantic models nested in plain containers: Converted via model_dump

    Example:
        >>> import json
        >>> from uuid import uuid4
        >>> from datetime import datetime, UTC
        >>>
        >>> data = {"id": uuid4(), "timestamp": datetime.now(UTC)}
        >>> json_str = json.dumps(data, cls=RabbitLinkJSONEncoder)
    """

    def default(self, obj: Any) -> Any:
        """
        Convert non-serializable objects to JSON-serializable formats.

        Args:
            obj: Object to serialize

        Returns:
            JSON-serializable representation

        Raises:
            TypeError: If object type is not supported
        """
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json")
        return super().default(obj)


def json_dumps(obj: Any) -> str:
    """
    Serialize object to JSON string using RabbitLinkJSONEncoder.

    Args:
        obj: Object to serialize

    Returns:
        JSON string representation
    """
    return json.dumps(obj, cls=RabbitLinkJSONEncoder)


def json_loads(s: str | bytes) -> Any:
    """
    Deserialize a JSON string or message body to a Python object.

    Note: UUID and datetime strings are NOT converted back to their
    original types - that's the application's responsibility.

    Args:
        s: JSON text or UTF-8 encoded bytes

    Returns:
        Python object representation
    """
    return json.loads(s)


def encode_payload(message: Any) -> bytes:
    """
    Encode a publish payload into a message body.

    - ``bytes``, ``bytearray`` and ``memoryview`` pass through unchanged
    - ``str`` is used as-is, UTF-8 encoded
    - pydantic models are serialized with ``model_dump_json()``
    - anything else is encoded as JSON

    Args:
        message: The payload to encode

    Returns:
        The message body

    Raises:
        SerializationError: If the payload cannot be encoded
    """
    if isinstance(message, bytes):
        return message
    if isinstance(message, (bytearray, memoryview)):
        return bytes(message)
    if isinstance(message, str):
        return message.encode("utf-8")

    try:
        if isinstance(message, BaseModel):
            return message.model_dump_json().encode("utf-8")
        return json_dumps(message).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(type(message).__name__, str(e)) from e


__all__ = [
    "RabbitLinkJSONEncoder",
    "encode_payload",
    "json_dumps",
    "json_loads",
]
