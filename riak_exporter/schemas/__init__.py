"""Data types exchanged between the Riak client, the collector and the API."""

from .snapshot import DerivedGauge, MetricSnapshot, ScrapeResult
from .stats import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
    parse_stats_payload,
)

__all__ = [
    "DerivedGauge",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "MetricSnapshot",
    "ScrapeResult",
    "parse_stats_payload",
]
