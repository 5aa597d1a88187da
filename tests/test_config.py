"""Tests for configuration loading and validation."""

from __future__ import annotations

import pytest

from riak_exporter import create_app
from riak_exporter.config import Environment, Settings
from riak_exporter.exceptions import ConfigurationError


def test_load_defaults():
    settings = Settings.load(Environment(_env_file=None))

    assert settings.listen_address == ":9104"
    assert settings.metrics_path == "/metrics"
    assert settings.riak_uri == "http://localhost:8098"
    assert settings.timeout_seconds == 5.0
    assert settings.is_production


def test_load_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RIAK_URI", "https://riak-1.internal:8098/")
    monkeypatch.setenv("RIAK_EXPORTER_LISTEN_ADDRESS", "127.0.0.1:9200")
    monkeypatch.setenv("RIAK_TIMEOUT_SECONDS", "1.5")

    settings = Settings.load(Environment(_env_file=None))

    assert settings.riak_uri == "https://riak-1.internal:8098"
    assert settings.ping_url == "https://riak-1.internal:8098/ping"
    assert settings.stats_url == "https://riak-1.internal:8098/stats"
    assert settings.listen_address == "127.0.0.1:9200"
    assert settings.timeout_seconds == 1.5


def test_overrides_win_over_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("RIAK_URI", "http://from-env:8098")

    settings = Settings.load(
        Environment(_env_file=None), riak_uri="http://from-flag:8098", metrics_path=None
    )

    assert settings.riak_uri == "http://from-flag:8098"
    assert settings.metrics_path == "/metrics"


def test_settings_are_immutable():
    settings = Settings()

    with pytest.raises(Exception):
        settings.riak_uri = "http://elsewhere:8098"  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"riak_uri": "localhost:8098"},
        {"riak_uri": "ftp://riak.test"},
        {"riak_uri": "http://"},
        {"metrics_path": "metrics"},
        {"metrics_path": "/"},
        {"listen_address": "9104"},
        {"listen_address": ":99999"},
        {"timeout_seconds": 0},
        {"log_level": "chatty"},
        {"flask_env": "staging"},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ConfigurationError):
        Settings.load(Environment(_env_file=None), **overrides)


def test_create_app_validates_settings():
    with pytest.raises(ConfigurationError, match="Riak URI"):
        create_app(Settings(riak_uri="not a url"))
