"""Client configuration and the process-wide default instance.

A :class:`Configuration` can be passed explicitly to
:class:`~doohly.api_client.DoohlyClient`. Callers that prefer global defaults
use :func:`configure`, :func:`get_configuration`, :func:`set_configuration`
and :func:`reset_configuration`. The global holder is not thread-safe.
"""

import json
import pathlib
from typing import Any

import pydantic

from .errors import ConfigurationError

DEFAULT_API_BASE_URL = "https://api.dooh.ly/api/public"
DEFAULT_TIMEOUT = 30.0
DEFAULT_OPEN_TIMEOUT = 10.0


class Configuration(pydantic.BaseModel):
    """Settings used to build a Doohly API client."""

    model_config = pydantic.ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    api_token: str | None = pydantic.Field(None, description="Bearer token")
    api_base_url: str = pydantic.Field(
        DEFAULT_API_BASE_URL,
        description="Base URL of the public API",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    open_timeout: float = pydantic.Field(
        DEFAULT_OPEN_TIMEOUT,
        description="Connect timeout in seconds",
        gt=0,
    )
    logger: Any = pydantic.Field(
        None,
        description="Logger receiving request/response events",
        exclude=True,
    )

    def validate(self) -> bool:  # type: ignore[override]
        """Check that the configuration can be used to send requests.

        Raises:
            ConfigurationError: If no API token is set.
        """
        if not self.api_token:
            msg = "API token is required"
            raise ConfigurationError(msg)
        return True


_configuration: Configuration | None = None


def get_configuration() -> Configuration:
    """Return the global configuration, creating it on first access."""
    global _configuration  # noqa: PLW0603
    if _configuration is None:
        _configuration = Configuration()
    return _configuration


def set_configuration(config: Configuration) -> None:
    """Replace the global configuration."""
    global _configuration  # noqa: PLW0603
    _configuration = config


def configure(**overrides: Any) -> Configuration:
    """Update the global configuration in place and validate it.

    Example:
        >>> import doohly
        >>> doohly.configure(api_token="secret", timeout=60)
    """
    config = get_configuration()
    for name, value in overrides.items():
        if name not in Configuration.model_fields:
            msg = f"Unknown configuration option: {name}"
            raise ConfigurationError(msg)
        setattr(config, name, value)
    config.validate()
    return config


def reset_configuration() -> Configuration:
    """Reset the global configuration to defaults."""
    global _configuration  # noqa: PLW0603
    _configuration = Configuration()
    return _configuration


def load_config(config_path: str | pathlib.Path) -> Configuration:
    """Load configuration from JSON file."""
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return Configuration(**data)
