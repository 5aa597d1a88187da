"""Tagged representation of the Riak ``/stats`` payload.

The decoded JSON is converted into one variant per JSON value kind so that
flattening can match on ``JsonNumber`` explicitly instead of probing raw
Python types at runtime.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Mapping, TypeAlias

from riak_exporter.exceptions import StatsPayloadInvalid


@dataclass(frozen=True, slots=True)
class JsonNumber:
    value: float


@dataclass(frozen=True, slots=True)
class JsonString:
    value: str


@dataclass(frozen=True, slots=True)
class JsonBool:
    value: bool


@dataclass(frozen=True, slots=True)
class JsonNull:
    pass


@dataclass(frozen=True, slots=True)
class JsonArray:
    items: tuple[JsonValue, ...]


@dataclass(frozen=True, slots=True)
class JsonObject:
    fields: Mapping[str, JsonValue]


JsonValue: TypeAlias = JsonNumber | JsonString | JsonBool | JsonNull | JsonArray | JsonObject


def _tag_scalar(raw: Any) -> JsonValue:
    match raw:
        # bool must come first: it is a subclass of int
        case bool():
            return JsonBool(raw)
        case int() | float():
            number = float(raw)
            if not math.isfinite(number):
                raise OverflowError(f"number {raw!r} does not fit in a float")
            return JsonNumber(number)
        case str():
            return JsonString(raw)
        case None:
            return JsonNull()
        case _:
            raise TypeError(f"unsupported JSON value of type {type(raw).__name__}")


def to_json_value(raw: Any) -> JsonValue:
    """Convert a value produced by ``json.loads`` into its tagged variant.

    Containers are walked with an explicit stack, so nesting depth is bounded
    only by what the JSON decoder accepted.
    """
    if not isinstance(raw, (list, dict)):
        return _tag_scalar(raw)

    tagged: dict[int, JsonValue] = {}
    stack: list[tuple[list | dict, bool]] = [(raw, False)]
    while stack:
        node, children_done = stack.pop()
        children = node if isinstance(node, list) else list(node.values())
        if not children_done:
            stack.append((node, True))
            stack.extend((child, False) for child in children if isinstance(child, (list, dict)))
            continue

        items = [
            tagged[id(child)] if isinstance(child, (list, dict)) else _tag_scalar(child)
            for child in children
        ]
        if isinstance(node, list):
            tagged[id(node)] = JsonArray(tuple(items))
        else:
            tagged[id(node)] = JsonObject(dict(zip(node.keys(), items)))

    return tagged[id(raw)]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_stats_payload(body: bytes | str, *, url: str | None = None) -> dict[str, JsonValue]:
    """Parse a stats body into a mapping of key to tagged value.

    Duplicate keys resolve to the last occurrence.

    Raises:
        StatsPayloadInvalid: If the body is not valid JSON or its root is not an object
    """
    try:
        raw = json.loads(body, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise StatsPayloadInvalid(f"malformed stats JSON: {exc}", url=url) from exc

    if not isinstance(raw, dict):
        raise StatsPayloadInvalid(
            f"stats JSON root must be an object, got {type(raw).__name__}", url=url
        )

    try:
        return {key: to_json_value(value) for key, value in raw.items()}
    except OverflowError as exc:
        raise StatsPayloadInvalid(f"stats JSON value out of range: {exc}", url=url) from exc
