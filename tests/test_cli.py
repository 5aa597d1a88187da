"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

import riak_exporter.cli as cli_module
from riak_exporter.cli import cli


@pytest.fixture
def served(monkeypatch: pytest.MonkeyPatch) -> list:
    calls: list = []
    monkeypatch.setattr(
        cli_module, "_serve", lambda app, settings, address: calls.append((app, settings, address))
    )
    return calls


def test_flags_configure_the_app(served: list):
    result = CliRunner().invoke(
        cli,
        [
            "--web.listen-address", "127.0.0.1:9200",
            "--web.telemetry-path", "/riak",
            "--riak.uri", "http://riak-1:8098",
            "--riak.timeout", "3",
        ],
    )

    assert result.exit_code == 0, result.output
    (app, settings, address), = served
    assert settings.riak_uri == "http://riak-1:8098"
    assert settings.metrics_path == "/riak"
    assert settings.timeout_seconds == 3.0
    assert (address.host, address.port) == ("127.0.0.1", 9200)
    assert any(rule.rule == "/riak" for rule in app.url_map.iter_rules())


def test_defaults(served: list):
    result = CliRunner().invoke(cli, [])

    assert result.exit_code == 0, result.output
    (_, settings, address), = served
    assert settings.riak_uri == "http://localhost:8098"
    assert address.port == 9104


def test_invalid_configuration_exits_with_error(served: list):
    result = CliRunner().invoke(cli, ["--riak.uri", "not-a-url"])

    assert result.exit_code == 1
    assert "Riak URI" in result.output
    assert served == []


def test_unbindable_address_exits_with_error(monkeypatch: pytest.MonkeyPatch):
    def _fail(app, settings, address):
        raise OSError(98, "Address already in use")

    monkeypatch.setattr(cli_module, "_serve", _fail)

    result = CliRunner().invoke(cli, ["--web.listen-address", ":9104"])

    assert result.exit_code == 1


def test_version_flag():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "riak_exporter" in result.output


def test_production_serves_with_waitress_on_all_addresses(monkeypatch: pytest.MonkeyPatch):
    calls: list = []
    monkeypatch.setattr("waitress.serve", lambda app, **kwargs: calls.append(kwargs))

    result = CliRunner().invoke(cli, ["--web.listen-address", ":9104"])

    assert result.exit_code == 0, result.output
    assert calls == [{"listen": "*:9104", "threads": 8}]
