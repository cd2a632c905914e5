"""Doohly API client.

Typed HTTP client for the Doohly digital out-of-home advertising platform's
public REST API: devices, bookings and creative uploads.

Exports:
    DoohlyClient: HTTP client with bearer authentication and error mapping.
    Configuration: Client settings, plus helpers managing a global default.
    client: Convenience constructor using the global configuration.
    Error classes: DoohlyError and its subclasses.
"""

from .api_client import DoohlyClient
from .configuration import (
    DEFAULT_API_BASE_URL,
    DEFAULT_OPEN_TIMEOUT,
    DEFAULT_TIMEOUT,
    Configuration,
    configure,
    get_configuration,
    load_config,
    reset_configuration,
    set_configuration,
)
from .errors import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    DoohlyError,
    NotFoundError,
    RateLimitError,
    ServerError,
)

__version__ = "0.1.0"


def client(
    api_token: str | None = None,
    config: Configuration | None = None,
) -> DoohlyClient:
    """Build a client, falling back to the global configuration."""
    return DoohlyClient(api_token=api_token, config=config)


__all__ = [
    "DEFAULT_API_BASE_URL",
    "DEFAULT_OPEN_TIMEOUT",
    "DEFAULT_TIMEOUT",
    "APIError",
    "AuthenticationError",
    "BadRequestError",
    "Configuration",
    "ConfigurationError",
    "DoohlyClient",
    "DoohlyError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "client",
    "configure",
    "get_configuration",
    "load_config",
    "reset_configuration",
    "set_configuration",
]
