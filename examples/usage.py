"""Walk through the main Doohly client calls.

Run with ``DOOHLY_API_TOKEN`` set in the environment.
"""

import os

import structlog

import doohly
from doohly.log import configure_logging

configure_logging()
logger = structlog.get_logger("usage")

# Option 1: global configuration
doohly.configure(
    api_token=os.environ.get("DOOHLY_API_TOKEN", "your_api_token_here"),
    timeout=30,
)
client = doohly.DoohlyClient()

# Option 2: explicit configuration
# client = doohly.DoohlyClient(config=doohly.Configuration(api_token="..."))

try:
    devices = client.devices()
    device_list = devices.get("devices", []) if isinstance(devices, dict) else devices
    logger.info("Fetched devices", count=len(device_list or []))
    if device_list:
        first = device_list[0]
        logger.info("First device", name=first.get("name"), id=first.get("id"))
except doohly.APIError as e:
    logger.error("Error fetching devices", error=e.message, status=e.status)

try:
    bookings = client.bookings()
    booking_list = bookings.get("bookings", []) if isinstance(bookings, dict) else bookings
    logger.info("Fetched bookings", count=len(booking_list or []))
    if booking_list:
        first = booking_list[0]
        logger.info("First booking", name=first.get("name"), status=first.get("status"))
except doohly.APIError as e:
    logger.error("Error fetching bookings", error=e.message, status=e.status)

try:
    upload = client.get_signed_upload_url(
        name="example-creative.png",
        mime_type="image/png",
        file_size=100_000,
        playback_scaling="contain",
    )
    logger.info("Signed upload URL", id=upload["id"], url=upload["uploadUrl"][:50])
except doohly.APIError as e:
    logger.error("Error getting upload URL", error=e.message, status=e.status)

client.close()
