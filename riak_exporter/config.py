"""Configuration management using Pydantic settings.

This module implements a two-layer configuration system:
1. Environment: Loads raw values from environment variables (UPPER_CASE)
2. Settings: Immutable application settings with lowercase fields

Usage:
    # Production: Load from environment, optionally overridden by CLI flags
    settings = Settings.load(riak_uri="http://riak-1:8098")

    # Tests: Construct directly with test values
    settings = Settings(riak_uri="http://riak.test:8098")

Settings are read once at startup and passed explicitly into the services
that need them; nothing mutates them afterwards.
"""

import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from riak_exporter.consts import (
    DEFAULT_LISTEN_ADDRESS,
    DEFAULT_METRICS_PATH,
    DEFAULT_RIAK_URI,
    DEFAULT_TIMEOUT_SECONDS,
)
from riak_exporter.exceptions import ConfigurationError
from riak_exporter.utils.listen_address import ListenAddress, parse_listen_address

# Project root directory (parent of riak_exporter/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

_VALID_ENVS = {"development", "production", "testing"}


class Environment(BaseSettings):
    """Raw environment variable loading.

    This class loads values directly from environment variables with UPPER_CASE names.
    It should not contain any derived values or transformation logic.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    FLASK_ENV: str = Field(default="production")
    RIAK_EXPORTER_LISTEN_ADDRESS: str = Field(
        default=DEFAULT_LISTEN_ADDRESS,
        description="Address to listen on for web interface and telemetry"
    )
    RIAK_EXPORTER_TELEMETRY_PATH: str = Field(
        default=DEFAULT_METRICS_PATH,
        description="Path under which to expose metrics"
    )
    RIAK_EXPORTER_LOG_LEVEL: str = Field(default="INFO")
    RIAK_URI: str = Field(
        default=DEFAULT_RIAK_URI,
        description="The URI which the Riak HTTP API listens on"
    )
    RIAK_TIMEOUT_SECONDS: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Timeout for each request to the Riak HTTP API"
    )


class Settings(BaseModel):
    """Immutable application settings.

    For production, use Settings.load() to load from environment.
    For tests, construct directly with test values (defaults provided for convenience).
    """

    model_config = ConfigDict(frozen=True)

    flask_env: str = "production"
    listen_address: str = DEFAULT_LISTEN_ADDRESS
    metrics_path: str = DEFAULT_METRICS_PATH
    log_level: str = "INFO"
    riak_uri: str = DEFAULT_RIAK_URI
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @field_validator("riak_uri")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.flask_env == "production"

    @property
    def ping_url(self) -> str:
        return f"{self.riak_uri}/ping"

    @property
    def stats_url(self) -> str:
        return f"{self.riak_uri}/stats"

    def parsed_listen_address(self) -> ListenAddress:
        return parse_listen_address(self.listen_address)

    def validate_config(self) -> None:
        """Validate the settings once, before anything is served.

        Raises:
            ConfigurationError: If any setting is unusable
        """
        errors: list[str] = []

        if self.flask_env not in _VALID_ENVS:
            errors.append(
                f"FLASK_ENV must be one of {sorted(_VALID_ENVS)}; got '{self.flask_env}'"
            )

        parsed = urlparse(self.riak_uri)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(
                f"Riak URI must be an absolute http(s) URL; got '{self.riak_uri}'"
            )

        if not self.metrics_path.startswith("/") or self.metrics_path == "/":
            errors.append(
                f"Telemetry path must start with '/' and not be the root; got '{self.metrics_path}'"
            )

        try:
            parse_listen_address(self.listen_address)
        except ValueError as exc:
            errors.append(str(exc))

        if self.timeout_seconds <= 0:
            errors.append("Riak timeout must be greater than zero")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"Unknown log level '{self.log_level}'")

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            )

    @classmethod
    def load(cls, env: Environment | None = None, **overrides: Any) -> "Settings":
        """Load settings from environment variables.

        Args:
            env: Optional Environment instance (for testing). If None, loads from environment.
            overrides: Explicit values (e.g. command-line flags); ``None`` values are ignored.

        Returns:
            Validated Settings instance

        Raises:
            ConfigurationError: If the resolved settings are invalid
        """
        if env is None:
            env = Environment()

        values: dict[str, Any] = {
            "flask_env": env.FLASK_ENV.strip().lower(),
            "listen_address": env.RIAK_EXPORTER_LISTEN_ADDRESS,
            "metrics_path": env.RIAK_EXPORTER_TELEMETRY_PATH,
            "log_level": env.RIAK_EXPORTER_LOG_LEVEL,
            "riak_uri": env.RIAK_URI,
            "timeout_seconds": env.RIAK_TIMEOUT_SECONDS,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        settings = cls(**values)
        settings.validate_config()
        return settings
