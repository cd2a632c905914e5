"""Error taxonomy for the Doohly client.

Configuration errors signal caller misuse and carry no HTTP context. API
errors are raised from non-2xx responses and carry the status code, the
(parsed) response body and the raw ``httpx.Response`` for inspection.
"""

from typing import Any

import httpx


class DoohlyError(Exception):
    """Base class for all Doohly errors."""


class ConfigurationError(DoohlyError):
    """Raised when the client configuration is invalid."""


class APIError(DoohlyError):
    """Raised when the API answers with a non-successful status."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        body: Any = None,
        response: httpx.Response | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body
        self.response = response


class BadRequestError(APIError):
    """Raised on HTTP 400."""


class AuthenticationError(APIError):
    """Raised on HTTP 401."""


class NotFoundError(APIError):
    """Raised on HTTP 404."""


class RateLimitError(APIError):
    """Raised on HTTP 429."""


class ServerError(APIError):
    """Raised on HTTP 5xx."""
