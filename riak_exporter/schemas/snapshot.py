"""Per-scrape result and the metric snapshot rendered from it."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Mapping

from riak_exporter.consts import (
    BUILD_INFO_METRIC,
    NAMESPACE,
    SCRAPE_DURATION_METRIC,
    SCRAPE_ERROR_METRIC,
    SCRAPES_TOTAL_METRIC,
    UP_METRIC,
)
from riak_exporter.schemas.stats import JsonNumber, JsonValue

logger = logging.getLogger(__name__)

_METRIC_NAME_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:]*$")

# Stats keys may not shadow the exporter's own metrics
_RESERVED_NAMES = frozenset(
    {UP_METRIC, SCRAPE_DURATION_METRIC, SCRAPES_TOTAL_METRIC, SCRAPE_ERROR_METRIC, BUILD_INFO_METRIC}
)


@dataclass(frozen=True, slots=True)
class ScrapeResult:
    """Outcome of one probe-and-fetch cycle.

    ``up`` is ``None`` when the ping request never produced a status code.
    """

    up: bool | None
    stats: Mapping[str, JsonValue]
    duration_seconds: float
    errored: bool


@dataclass(frozen=True, slots=True)
class DerivedGauge:
    name: str
    key: str
    value: float


@dataclass(frozen=True, slots=True)
class MetricSnapshot:
    gauges: tuple[DerivedGauge, ...]
    last_scrape_duration_seconds: float
    scrapes_total: int
    last_scrape_error: bool
    up: bool

    @classmethod
    def from_result(cls, result: ScrapeResult, *, scrapes_total: int) -> "MetricSnapshot":
        return cls(
            gauges=flatten_stats(result.stats),
            last_scrape_duration_seconds=max(result.duration_seconds, 0.0),
            scrapes_total=scrapes_total,
            last_scrape_error=result.errored,
            up=bool(result.up),
        )


def metric_name_for(key: str) -> str:
    return f"{NAMESPACE}_{key}"


def flatten_stats(stats: Mapping[str, JsonValue]) -> tuple[DerivedGauge, ...]:
    """Turn every numeric top-level stat into one gauge; skip everything else."""
    gauges: list[DerivedGauge] = []
    for key, value in stats.items():
        match value:
            case JsonNumber(value=number):
                name = metric_name_for(key)
                if not _METRIC_NAME_RE.match(name) or name in _RESERVED_NAMES:
                    logger.debug("Skipping stat with unusable metric name: %r", key)
                    continue
                gauges.append(DerivedGauge(name=name, key=key, value=number))
            case _:
                continue
    return tuple(gauges)
