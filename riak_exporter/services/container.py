"""Dependency injection container for services."""

from dependency_injector import containers, providers

from riak_exporter.config import Settings
from riak_exporter.services.collector import RiakCollector, create_registry
from riak_exporter.services.riak_client import RiakClient


class ServiceContainer(containers.DeclarativeContainer):
    """Container for service dependency injection."""

    config = providers.Dependency(instance_of=Settings)

    # Outbound HTTP to the Riak node
    riak_client = providers.Singleton(RiakClient, settings=config)

    # Collector adapter; owns the scrape counter, so one per application
    riak_collector = providers.Singleton(
        RiakCollector,
        settings=config,
        riak_client=riak_client,
    )

    # Registry rendered by the metrics endpoint
    metrics_registry = providers.Singleton(create_registry, collector=riak_collector)
