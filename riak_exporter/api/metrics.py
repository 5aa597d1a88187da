"""Metrics API for Prometheus scraping endpoint."""

from typing import Any

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response
from prometheus_client import CollectorRegistry, generate_latest

from riak_exporter.services.container import ServiceContainer

# Mounted at the configured telemetry path by create_app()
metrics_bp = Blueprint("metrics", __name__)


@metrics_bp.route("", methods=["GET"])
@inject
def get_metrics(
    registry: CollectorRegistry = Provide[ServiceContainer.metrics_registry],
) -> Any:
    """Scrape the Riak node and return metrics in Prometheus text format.

    Always answers 200; a failed scrape is reported through the
    ``riak_up`` and ``riak_exporter_last_scrape_error`` gauges.
    """
    metrics_text = generate_latest(registry).decode("utf-8")

    return Response(
        metrics_text,
        content_type='text/plain; version=0.0.4; charset=utf-8'
    )
