"""Configuration management for httpstat.

Settings come from ``HTTPSTAT_*`` environment variables; command-line
options override them.
"""

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import BODY_FILENAME, REQUEST_TIMEOUT
from .errors import ConfigError

ENV_PREFIX = "HTTPSTAT_"

TRUTHY = frozenset({"true", "1", "yes", "on"})


def parse_bool(value: str) -> bool:
    """Return True for an accepted truthy string (case-insensitive)."""
    return value.strip().lower() in TRUTHY


def default_body_path() -> Path:
    """Return the default destination for a persisted response body."""
    return Path(tempfile.gettempdir()) / BODY_FILENAME


class HttpstatConfig(BaseModel):
    """Root configuration for httpstat."""

    show_body: bool = Field(default=False, description="Persist the response body")
    show_ip: bool = Field(default=True, description="Print remote/local addresses")
    body_path: Path = Field(default_factory=default_body_path, description="Body destination")
    timeout: float = Field(default=REQUEST_TIMEOUT, description="Request timeout in seconds")
    debug: bool = Field(default=False, description="Enable debug logging")

    @field_validator("show_body", "show_ip", "debug", mode="before")
    @classmethod
    def coerce_flag(cls, value: object) -> object:
        """Accept the environment's truthy strings for boolean flags."""
        if isinstance(value, str):
            return parse_bool(value)
        return value

    @field_validator("timeout")
    @classmethod
    def timeout_positive(cls, value: float) -> float:
        """Reject non-positive timeouts."""
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value


def load_config(environ: Mapping[str, str] | None = None) -> HttpstatConfig:
    """Load config from HTTPSTAT_* environment variables.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Loaded configuration, with defaults for unset variables

    Raises:
        ConfigError: If a variable holds a value that cannot be parsed
    """
    if environ is None:
        environ = os.environ
    data = {
        name: environ[f"{ENV_PREFIX}{name.upper()}"]
        for name in HttpstatConfig.model_fields
        if f"{ENV_PREFIX}{name.upper()}" in environ
    }
    try:
        return HttpstatConfig.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {errors}") from e
