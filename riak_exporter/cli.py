"""Command-line entry point: flags, logging setup and serving."""

from __future__ import annotations

import logging

import click
from dotenv import load_dotenv

from riak_exporter import create_app
from riak_exporter.app import App
from riak_exporter.config import Settings
from riak_exporter.consts import PROJECT_NAME, VERSION
from riak_exporter.exceptions import ConfigurationError
from riak_exporter.utils.listen_address import ListenAddress

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--web.listen-address", "listen_address", default=None,
    help="Address to listen on for web interface and telemetry. [default: :9104]",
)
@click.option(
    "--web.telemetry-path", "metrics_path", default=None,
    help="Path under which to expose metrics. [default: /metrics]",
)
@click.option(
    "--riak.uri", "riak_uri", default=None,
    help="The URI which the Riak HTTP API listens on. [default: http://localhost:8098]",
)
@click.option(
    "--riak.timeout", "timeout_seconds", type=float, default=None,
    help="Timeout in seconds for each request to the Riak HTTP API. [default: 5]",
)
@click.option(
    "--log.level", "log_level", type=click.Choice(_LOG_LEVELS, case_sensitive=False), default=None,
    help="Only log messages with the given severity or above. [default: INFO]",
)
@click.version_option(VERSION, prog_name=PROJECT_NAME)
def cli(
    listen_address: str | None,
    metrics_path: str | None,
    riak_uri: str | None,
    timeout_seconds: float | None,
    log_level: str | None,
) -> None:
    """Expose the stats of a Riak node as Prometheus metrics."""
    try:
        settings = Settings.load(
            listen_address=listen_address,
            metrics_path=metrics_path,
            riak_uri=riak_uri,
            timeout_seconds=timeout_seconds,
            log_level=log_level,
        )
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc

    _configure_logging(settings.log_level)

    app = create_app(settings)
    address = settings.parsed_listen_address()

    logger.info("Starting %s %s", PROJECT_NAME, VERSION)
    logger.info("Listening on %s", address)

    try:
        _serve(app, settings, address)
    except OSError as exc:
        logger.critical("Cannot listen on %s: %s", address, exc)
        raise SystemExit(1) from exc


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _serve(app: App, settings: Settings, address: ListenAddress) -> None:
    if settings.is_production:
        from waitress import serve  # type: ignore[import-untyped]

        serve(app, listen=address.waitress_listen, threads=8)
    else:
        app.run(host=address.bind_host, port=address.port, debug=True)


def main() -> None:
    """Main CLI entry point."""
    # Load environment variables from .env file if present
    load_dotenv()

    cli()


if __name__ == "__main__":
    main()
