"""Collector adapter that turns one Riak scrape into Prometheus metrics.

Each call to ``scrape()`` pings the node, fetches its stats, flattens the
numeric values into gauges and reports the exporter's own metrics. The
Prometheus registry invokes ``collect()`` on every request to the metrics
endpoint, so every scrape of the exporter is one scrape of Riak.
"""

import logging
import platform
import threading
import time
from collections.abc import Iterator

from prometheus_client import (
    CollectorRegistry,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
)
from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily, Metric
from prometheus_client.registry import Collector

from riak_exporter.config import Settings
from riak_exporter.consts import (
    BUILD_INFO_METRIC,
    SCRAPE_DURATION_METRIC,
    SCRAPE_ERROR_METRIC,
    SCRAPES_TOTAL_METRIC,
    UP_METRIC,
    VERSION,
)
from riak_exporter.exceptions import RiakNodeDown, ScrapeError
from riak_exporter.schemas.snapshot import MetricSnapshot, ScrapeResult
from riak_exporter.schemas.stats import JsonValue
from riak_exporter.services.riak_client import RiakClient

logger = logging.getLogger(__name__)

_now = time.perf_counter


class RiakCollector(Collector):
    """Scrapes a Riak node on demand and exposes the result as metrics."""

    def __init__(self, settings: Settings, riak_client: RiakClient) -> None:
        self.settings = settings
        self.riak_client = riak_client

        self._lock = threading.Lock()
        self._scrapes_total = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def scrape(self) -> MetricSnapshot:
        """Run one probe-and-fetch cycle and return the resulting snapshot.

        Never raises: any failure shows up as ``up``/``last_scrape_error``.
        """
        scrapes_total = self._count_scrape()
        started = _now()

        up: bool | None = None
        stats: dict[str, JsonValue] = {}
        errored = False

        try:
            try:
                self.riak_client.ping()
            except RiakNodeDown:
                up = False
                raise
            up = True
            stats = self.riak_client.fetch_stats()
        except ScrapeError as e:
            errored = True
            logger.error("Scrape of Riak node %s failed: %s", self.settings.riak_uri, e)
        except Exception:
            errored = True
            logger.exception("Unexpected error scraping Riak node %s", self.settings.riak_uri)

        result = ScrapeResult(
            up=up,
            stats=stats,
            duration_seconds=_now() - started,
            errored=errored,
        )
        return MetricSnapshot.from_result(result, scrapes_total=scrapes_total)

    @property
    def scrapes_total(self) -> int:
        with self._lock:
            return self._scrapes_total

    def collect(self) -> Iterator[Metric]:
        snapshot = self.scrape()

        for gauge in snapshot.gauges:
            yield GaugeMetricFamily(gauge.name, gauge.key, value=gauge.value)

        yield GaugeMetricFamily(
            SCRAPE_DURATION_METRIC,
            "Duration of the last scrape of metrics from Riak.",
            value=snapshot.last_scrape_duration_seconds,
        )
        yield CounterMetricFamily(
            SCRAPES_TOTAL_METRIC,
            "Total number of times Riak was scraped for metrics.",
            value=snapshot.scrapes_total,
        )
        yield GaugeMetricFamily(
            SCRAPE_ERROR_METRIC,
            "Whether the last scrape of metrics from Riak resulted in an error "
            "(1 for error, 0 for success).",
            value=1.0 if snapshot.last_scrape_error else 0.0,
        )
        yield GaugeMetricFamily(
            UP_METRIC,
            "Whether the Riak node is up.",
            value=1.0 if snapshot.up else 0.0,
        )

    def describe(self) -> Iterator[Metric]:
        # Registration must not trigger a scrape of the node
        return iter(())

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _count_scrape(self) -> int:
        with self._lock:
            self._scrapes_total += 1
            return self._scrapes_total


class BuildInfoCollector(Collector):
    """Constant ``build_info`` gauge describing the running exporter."""

    def collect(self) -> Iterator[Metric]:
        build_info = GaugeMetricFamily(
            BUILD_INFO_METRIC,
            "A metric with a constant '1' value labeled by version and pythonversion "
            "from which riak_exporter was built.",
            labels=["version", "pythonversion"],
        )
        build_info.add_metric([VERSION, platform.python_version()], 1.0)
        yield build_info


def create_registry(collector: RiakCollector) -> CollectorRegistry:
    """Build the registry served by the metrics endpoint."""
    registry = CollectorRegistry(auto_describe=False)
    registry.register(collector)
    registry.register(BuildInfoCollector())
    ProcessCollector(registry=registry)
    PlatformCollector(registry=registry)
    GCCollector(registry=registry)
    return registry
