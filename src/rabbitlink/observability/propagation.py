"""
Trace context propagation through AMQP message headers.

The AMQP header table is not a plain string map: values may be strings,
integers, booleans, binary, decimals, timestamps, nested tables or arrays.
MessageHeadersCarrier exposes the table as the text map OpenTelemetry
propagators expect, reading back only string values.

Example:
    >>> from rabbitlink.observability.propagation import (
    ...     default_propagator,
    ...     extract_trace_context,
    ...     inject_trace_context,
    ... )
    >>>
    >>> propagator = default_propagator()
    >>> headers: dict = {}
    >>> inject_trace_context(propagator, headers)
    >>> ctx = extract_trace_context(propagator, headers)
"""

from __future__ import annotations

from typing import Any

from opentelemetry.baggage.propagation import W3CBaggagePropagator
from opentelemetry.context import Context
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.propagators.textmap import Getter, Setter, TextMapPropagator
from opentelemetry.trace.propagation.tracecontext import TraceContextTextMapPropagator


class MessageHeadersCarrier:
    """
    Text-map view over an AMQP header table.

    ``get`` never raises: any value that is not a string reads as ``""``.
    ``set`` allocates the header table on first write.

    Attributes:
        headers: The wrapped header dict (None until the first ``set``)
    """

    def __init__(self, headers: dict[str, Any] | None = None) -> None:
        self.headers = headers

    def get(self, key: str) -> str:
        if not self.headers:
            return ""
        value = self.headers.get(key)
        if isinstance(value, str):
            return value
        # binary, numeric, boolean, decimal, timestamp, table, array, void
        return ""

    def set(self, key: str, value: str) -> None:
        if self.headers is None:
            self.headers = {}
        self.headers[key] = value

    def keys(self) -> list[str]:
        if not self.headers:
            return []
        return list(self.headers.keys())


class _CarrierGetter(Getter[MessageHeadersCarrier]):
    def get(self, carrier: MessageHeadersCarrier, key: str) -> list[str] | None:
        value = carrier.get(key)
        if value:
            return [value]
        return None

    def keys(self, carrier: MessageHeadersCarrier) -> list[str]:
        return carrier.keys()


class _CarrierSetter(Setter[MessageHeadersCarrier]):
    def set(self, carrier: MessageHeadersCarrier, key: str, value: str) -> None:
        carrier.set(key, value)


carrier_getter = _CarrierGetter()
carrier_setter = _CarrierSetter()


def default_propagator() -> TextMapPropagator:
    """
    Build the W3C trace context + baggage propagator.

    Returns a new composite propagator instead of reading the global one,
    so propagation never depends on process-wide OpenTelemetry setup.
    """
    return CompositePropagator(
        [TraceContextTextMapPropagator(), W3CBaggagePropagator()]
    )


def inject_trace_context(
    propagator: TextMapPropagator,
    headers: dict[str, Any],
    context: Context | None = None,
) -> dict[str, Any]:
    """
    Inject trace context into a header dict in place.

    Args:
        propagator: Propagator that writes the trace fields
        headers: Header table to write into
        context: Context to inject. None uses the current context.

    Returns:
        The same header dict, for chaining
    """
    carrier = MessageHeadersCarrier(headers)
    propagator.inject(carrier, context=context, setter=carrier_setter)
    return headers


def extract_trace_context(
    propagator: TextMapPropagator,
    headers: dict[str, Any] | None,
) -> Context:
    """
    Extract trace context from a delivery's header table.

    Always starts from an empty context, so the result only carries what
    the publisher injected. Missing or malformed fields yield a context
    without a valid span.
    """
    carrier = MessageHeadersCarrier(headers)
    return propagator.extract(carrier, context=Context(), getter=carrier_getter)


__all__ = [
    "MessageHeadersCarrier",
    "carrier_getter",
    "carrier_setter",
    "default_propagator",
    "extract_trace_context",
    "inject_trace_context",
]
