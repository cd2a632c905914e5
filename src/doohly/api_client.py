"""Doohly public API client.

Provides a synchronous HTTP client with bearer-token authentication that
mirrors the REST endpoints for devices, bookings and creative uploads, and
maps non-successful responses to the error taxonomy in :mod:`doohly.errors`.
No retries are attempted; callers own their retry policy.
"""

import logging
import time
from typing import Any

import httpx
import structlog

from .configuration import Configuration, get_configuration
from .errors import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    NotFoundError,
    RateLimitError,
    ServerError,
)
from .types import BookingFields, CreativeUpload, provided

logger = structlog.get_logger(__name__)

# Status code -> (error class, message prefix)
STATUS_ERRORS: dict[int, tuple[type[APIError], str]] = {
    400: (BadRequestError, "Bad Request"),
    401: (AuthenticationError, "Authentication failed"),
    404: (NotFoundError, "Resource not found"),
    429: (RateLimitError, "Rate limit exceeded"),
}


def parse_body(response: httpx.Response) -> Any:
    """Return the JSON-decoded body for JSON responses, the raw text otherwise."""
    media_type = response.headers.get("content-type", "").split(";")[0].strip()
    if not media_type.endswith("json"):
        return response.text
    if not response.content.strip():
        return None
    try:
        return response.json()
    except ValueError:
        # Gateways answer with HTML under a JSON content type.
        logger.warning(
            "Undecodable JSON body",
            status=response.status_code,
            content_type=media_type,
        )
        return response.text


def resolve_logger(configured: Any) -> Any:
    """Return a logger accepting key/value events.

    Standard library loggers are wrapped so events are rendered as logfmt
    before reaching their handlers. Anything else is used as given.
    """
    if configured is None:
        return logger
    if isinstance(configured, logging.Logger):
        return structlog.wrap_logger(
            configured,
            processors=[
                structlog.processors.format_exc_info,
                structlog.processors.LogfmtRenderer(key_order=("event",)),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
        )
    return configured


def handle_response(response: httpx.Response) -> Any:
    """Map an HTTP response to its parsed body or raise the matching error.

    Args:
        response: The response returned by the transport.

    Returns:
        The parsed body of a 2xx response.

    Raises:
        BadRequestError: On 400.
        AuthenticationError: On 401.
        NotFoundError: On 404.
        RateLimitError: On 429.
        ServerError: On 500-599.
        APIError: On any other non-2xx status.
    """
    status = response.status_code
    body = parse_body(response)

    if 200 <= status < 300:  # noqa: PLR2004
        return body

    if status in STATUS_ERRORS:
        error_cls, prefix = STATUS_ERRORS[status]
        message = f"{prefix}: {body}"
    elif 500 <= status < 600:  # noqa: PLR2004
        error_cls = ServerError
        message = f"Server error: {body}"
    else:
        error_cls = APIError
        message = f"API Error: {status} - {body}"

    raise error_cls(message, status=status, body=body, response=response)


class DoohlyClient:
    """HTTP client for the Doohly public API.

    Token and base URL are resolved from the explicit arguments first, then
    from ``config`` (the global configuration when omitted). Construction
    fails when no token can be resolved. Can be used as a context manager
    for automatic cleanup.
    """

    def __init__(
        self,
        api_token: str | None = None,
        api_base_url: str | None = None,
        *,
        config: Configuration | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            api_token: Bearer token; overrides the configuration's token.
            api_base_url: API base URL; overrides the configuration's URL.
            config: Configuration to read defaults from.
            transport: Optional httpx transport (used by tests).

        Raises:
            ConfigurationError: If the resolved token or base URL is empty.
        """
        if config is None:
            config = get_configuration()
        self.api_token = config.api_token if api_token is None else api_token
        if api_base_url is None:
            api_base_url = config.api_base_url

        if not self.api_token:
            msg = "API token is required"
            raise ConfigurationError(msg)
        if not api_base_url:
            msg = "API base URL is required"
            raise ConfigurationError(msg)

        self.api_base_url = api_base_url.rstrip("/")
        self._logger = resolve_logger(config.logger)
        self._client = httpx.Client(
            base_url=self.api_base_url,
            headers={
                "Authorization": f"Bearer {self.api_token}",
                "Accept": "application/json",
            },
            timeout=httpx.Timeout(config.timeout, connect=config.open_timeout),
            transport=transport,
        )

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the underlying HTTP client."""
        self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        start_time = time.time()
        self._logger.debug("Making API request", method=method, path=path, params=params)
        try:
            response = self._client.request(
                method,
                path,
                params=params or None,
                json=body,
            )
        except httpx.HTTPError:
            self._logger.exception(
                "API request failed",
                method=method,
                path=path,
                duration_seconds=round(time.time() - start_time, 3),
            )
            raise

        self._logger.debug(
            "API request completed",
            method=method,
            path=path,
            status=response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )
        return handle_response(response)

    # Devices

    def devices(self) -> Any:
        """List devices (``GET v1/devices``)."""
        return self._request("GET", "v1/devices")

    def device(self, device_id: str) -> Any:
        """Fetch a single device (``GET v2/devices/:id``)."""
        return self._request("GET", f"v2/devices/{device_id}")

    # Bookings

    def bookings(self, status: str | None = None) -> Any:
        """List bookings (``GET v2/bookings``).

        Args:
            status: Optional status filter, e.g. "booked", "paused",
                "completed". Omitted from the query string when None.
        """
        params = {}
        if status is not None:
            params["status"] = status
        return self._request("GET", "v2/bookings", params=params)

    def booking(self, booking_id: str) -> Any:
        """Fetch a single booking (``GET v2/bookings/:id``)."""
        return self._request("GET", f"v2/bookings/{booking_id}")

    def create_booking(
        self,
        name: str,
        *,
        external_id: str | None = None,
        plays_per_loop: int | None = None,
        loops_per_play: int | None = None,
        play_consecutively: bool | None = None,
        purchase_type: str | None = None,
        campaign: dict[str, Any] | None = None,
        schedule: dict[str, Any] | None = None,
        assigned_creatives: list[dict[str, Any]] | None = None,
        assigned_frames: list[dict[str, Any]] | None = None,
        tags: list[str] | None = None,
        seedooh: dict[str, Any] | None = None,
        status: str | None = None,
    ) -> Any:
        """Create a booking (``POST v2/bookings``).

        Only arguments that are not None are sent.

        Returns:
            The created booking as returned by the API.
        """
        fields = BookingFields(
            name=name,
            **provided(
                external_id=external_id,
                plays_per_loop=plays_per_loop,
                loops_per_play=loops_per_play,
                play_consecutively=play_consecutively,
                purchase_type=purchase_type,
                campaign=campaign,
                schedule=schedule,
                assigned_creatives=assigned_creatives,
                assigned_frames=assigned_frames,
                tags=tags,
                seedooh=seedooh,
                status=status,
            ),
        )
        return self._request("POST", "v2/bookings", body=fields.to_body())

    def update_booking(
        self,
        booking_id: str,
        *,
        name: str | None = None,
        external_id: str | None = None,
        plays_per_loop: int | None = None,
        loops_per_play: int | None = None,
        play_consecutively: bool | None = None,
        purchase_type: str | None = None,
        campaign: dict[str, Any] | None = None,
        schedule: dict[str, Any] | None = None,
        assigned_creatives: list[dict[str, Any]] | None = None,
        assigned_frames: list[dict[str, Any]] | None = None,
        tags: list[str] | None = None,
        seedooh: dict[str, Any] | None = None,
        status: str | None = None,
    ) -> Any:
        """Partially update a booking (``PATCH v2/bookings/:id``).

        Only arguments that are not None are sent.
        """
        fields = BookingFields(
            **provided(
                name=name,
                external_id=external_id,
                plays_per_loop=plays_per_loop,
                loops_per_play=loops_per_play,
                play_consecutively=play_consecutively,
                purchase_type=purchase_type,
                campaign=campaign,
                schedule=schedule,
                assigned_creatives=assigned_creatives,
                assigned_frames=assigned_frames,
                tags=tags,
                seedooh=seedooh,
                status=status,
            ),
        )
        return self._request(
            "PATCH",
            f"v2/bookings/{booking_id}",
            body=fields.to_body(),
        )

    def delete_booking(self, booking_id: str) -> Any:
        """Delete a booking (``DELETE v2/bookings/:id``)."""
        return self._request("DELETE", f"v2/bookings/{booking_id}")

    # Creatives

    def get_signed_upload_url(
        self,
        name: str,
        mime_type: str,
        file_size: int,
        playback_scaling: str | None = None,
        path: list[str] | None = None,
    ) -> Any:
        """Request a signed creative upload URL (``POST v1/library/creatives/upload``).

        Args:
            name: Creative name.
            mime_type: MIME type, e.g. "image/png" or "video/mp4".
            file_size: File size in bytes.
            playback_scaling: Optional scaling mode ("contain", "cover").
            path: Optional library folder path.

        Returns:
            Upload information including the upload id and signed URL.
        """
        upload = CreativeUpload(
            name=name,
            mime_type=mime_type,
            file_size=file_size,
            **provided(playback_scaling=playback_scaling, path=path),
        )
        return self._request("POST", "v1/library/creatives/upload", body=upload.to_body())

    def creative_upload_status(self, upload_id: str) -> Any:
        """Fetch creative upload status (``GET v1/library/creatives/upload/:id``)."""
        return self._request("GET", f"v1/library/creatives/upload/{upload_id}")
