"""structlog setup for the command-line entry points.

Output goes to stderr so the smoke test and example scripts keep stdout
free for their own results.
"""

import logging
import os
import sys
from typing import TextIO

import structlog

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


def configure_logging(
    log_level_name: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure structlog for logfmt output on ``stream`` (stderr by default).

    Args:
        log_level_name: Level name such as "DEBUG"; falls back to the
            ``LOG_LEVEL`` environment variable, then INFO.
        stream: File object receiving the rendered lines.
    """
    level_name = log_level_name or os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
                drop_missing=True,
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(stream or sys.stderr),
        # Not cached: entry points may reconfigure the stream or level.
        cache_logger_on_first_use=False,
    )
