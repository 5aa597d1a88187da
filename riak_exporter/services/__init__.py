"""Service layer exports."""

from .collector import BuildInfoCollector, RiakCollector, create_registry
from .riak_client import RiakClient

__all__ = [
    "BuildInfoCollector",
    "RiakClient",
    "RiakCollector",
    "create_registry",
]
