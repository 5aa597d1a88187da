from __future__ import annotations

from typing import Generator

import pytest

from riak_exporter import create_app
from riak_exporter.config import Settings
from riak_exporter.services.collector import RiakCollector
from riak_exporter.services.riak_client import RiakClient
from tests.fakes import PING_URL, RIAK_URI, STATS_URL, FakeResponse, FakeSession


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "FLASK_ENV",
        "RIAK_URI",
        "RIAK_TIMEOUT_SECONDS",
        "RIAK_EXPORTER_LISTEN_ADDRESS",
        "RIAK_EXPORTER_TELEMETRY_PATH",
        "RIAK_EXPORTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(riak_uri=RIAK_URI, flask_env="testing", timeout_seconds=2.5)


@pytest.fixture
def riak_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def healthy_riak(riak_session: FakeSession) -> FakeSession:
    """A node that answers ping and serves a small stats document."""
    riak_session.respond(PING_URL, FakeResponse(200, "OK"))
    riak_session.respond(
        STATS_URL,
        FakeResponse(
            200,
            '{"vnode_gets": 42, "node_get_fsm_time_mean": 1.5, '
            '"nodename": "riak@127.0.0.1", "connected_nodes": []}',
        ),
    )
    return riak_session


@pytest.fixture
def riak_client(settings: Settings, riak_session: FakeSession) -> RiakClient:
    return RiakClient(settings, session=riak_session)  # type: ignore[arg-type]


@pytest.fixture
def collector(settings: Settings, riak_client: RiakClient) -> RiakCollector:
    return RiakCollector(settings, riak_client)


@pytest.fixture
def app(settings: Settings, riak_client: RiakClient):
    flask_app = create_app(settings)
    flask_app.container.riak_client.override(riak_client)
    flask_app.testing = True
    return flask_app


@pytest.fixture
def client(app) -> Generator:
    with app.test_client() as client:
        yield client
