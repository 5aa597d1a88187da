"""Application factory for the Riak exporter."""

from __future__ import annotations

import logging

from riak_exporter.api import landing, metrics
from riak_exporter.app import App
from riak_exporter.config import Settings
from riak_exporter.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> App:
    """Application factory used by both tests and runtime.

    Raises:
        ConfigurationError: If the settings are invalid
    """
    if settings is None:
        settings = Settings.load()
    else:
        settings.validate_config()

    logger.info("Creating app for Riak node %s", settings.riak_uri)

    app = App(__name__)

    container = ServiceContainer()
    container.config.override(settings)
    container.wire(modules=[landing, metrics])
    app.container = container

    app.register_blueprint(landing.landing_bp)
    app.register_blueprint(metrics.metrics_bp, url_prefix=settings.metrics_path)

    return app
