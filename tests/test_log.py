"""Tests for the command-line logging setup."""

import io

import structlog

from doohly import log


def test_configure_logging_renders_logfmt_to_stream():
    """Events are rendered as logfmt lines on the given stream."""
    stream = io.StringIO()
    log.configure_logging("INFO", stream=stream)

    structlog.get_logger("doohly.tests").info("Fetched devices", count=3)

    line = stream.getvalue().strip()
    assert "level=info" in line
    assert 'msg="Fetched devices"' in line
    assert "count=3" in line


def test_configure_logging_filters_below_level():
    """Events below the configured level are dropped."""
    stream = io.StringIO()
    log.configure_logging("WARNING", stream=stream)

    structlog.get_logger("doohly.tests").info("hidden")

    assert stream.getvalue() == ""


def test_configure_logging_level_from_env(monkeypatch):
    """LOG_LEVEL is used when no level is passed."""
    monkeypatch.setenv(log.LOG_LEVEL_ENV_VAR, "DEBUG")
    stream = io.StringIO()
    log.configure_logging(stream=stream)

    structlog.get_logger("doohly.tests").debug("visible")

    assert 'msg=visible' in stream.getvalue()


def test_configure_logging_defaults_to_stderr(capsys):
    """Without a stream, output goes to stderr and stdout stays clean."""
    log.configure_logging("INFO")

    structlog.get_logger("doohly.tests").info("to stderr")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "to stderr" in captured.err
