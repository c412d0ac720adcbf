"""Unit tests for the colored access logger and logging setup."""

import logging

import pytest

from news_api.infrastructure.logging.colored_logger import AccessLogger, status_color


@pytest.mark.parametrize("status_code, color", [(200, "\033[92m"), (304, "\033[96m"), (404, "\033[93m"), (500, "\033[91m")])
def test_status_color_by_class(status_code, color):
    assert status_color(status_code) == color


def test_access_line_contains_request_details(caplog):
    caplog.set_level(logging.INFO, logger="news_api.access")
    AccessLogger().request("GET", 200, "/api/news?title=x", 3.4, "127.0.0.1")

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    for part in ("GET", "200", "/api/news?title=x", "3ms", "127.0.0.1"):
        assert part in record.getMessage()


def test_server_errors_are_logged_as_errors(caplog):
    caplog.set_level(logging.INFO, logger="news_api.access")
    AccessLogger().request("PATCH", 500, "/api/news/x", 12.0)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert "- -" in record.getMessage()
