"""Smoke test against the live Doohly API.

Reads the token from ``DOOHLY_API_TOKEN`` (or a JSON configuration file at
``DOOHLY_CONFIG_PATH``), lists devices and reports the outcome.
"""

import os
import sys

import structlog

from .api_client import DoohlyClient
from .configuration import Configuration, load_config
from .errors import APIError, AuthenticationError, DoohlyError
from .log import configure_logging

CONFIG_ENV_VAR = "DOOHLY_CONFIG_PATH"
TOKEN_ENV_VAR = "DOOHLY_API_TOKEN"
logger = structlog.get_logger(__name__)


def resolve_config() -> Configuration:
    """Build the configuration from the environment."""
    config_path = os.environ.get(CONFIG_ENV_VAR)
    config = load_config(config_path) if config_path else Configuration()
    if token := os.environ.get(TOKEN_ENV_VAR):
        config.api_token = token
    return config


def run(client: DoohlyClient) -> bool:
    """List devices and log the outcome. Returns True on success."""
    logger.info("Testing API connection", base_url=client.api_base_url)
    try:
        devices = client.devices()
    except AuthenticationError as e:
        logger.error("Authentication failed", error=e.message)  # noqa: TRY400
        return False
    except APIError as e:
        logger.error("API error", error=e.message, status=e.status)  # noqa: TRY400
        return False

    logger.info(
        "API connection successful",
        response_type=type(devices).__name__,
        response=devices,
    )
    return True


def main() -> int:
    """Console entry point for ``doohly-smoke-test``."""
    configure_logging()
    try:
        config = resolve_config()
        with DoohlyClient(config=config) as client:
            ok = run(client)
    except DoohlyError as e:
        logger.error("Invalid configuration", error=str(e))  # noqa: TRY400
        return 1
    except Exception:
        logger.exception("Smoke test failed")
        return 1
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
