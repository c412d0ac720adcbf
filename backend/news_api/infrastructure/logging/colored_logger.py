"""Colored access logger — one ANSI-colored line per HTTP request.

Color scheme (by status class):
    Green   — 2xx
    Cyan    — 3xx
    Yellow  — 4xx
    Red     — 5xx
"""

import logging


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


def status_color(status_code: int) -> str:
    """ANSI color for an HTTP status code."""
    if status_code >= 500:
        return _Colors.RED
    if status_code >= 400:
        return _Colors.YELLOW
    if status_code >= 300:
        return _Colors.CYAN
    return _Colors.GREEN


# ── AccessLogger ─────────────────────────────────────────────────────

class AccessLogger:
    """Writes ``METHOD STATUS PATH Nms - client`` lines, colored by status.

    Usage:
        log = AccessLogger()
        log.request("GET", 200, "/api/news?title=x", 3.2, "127.0.0.1")
    """

    def __init__(self, name: str = "news_api.access"):
        self._logger = logging.getLogger(name)

    def request(
        self,
        method: str,
        status_code: int,
        path: str,
        elapsed_ms: float,
        client: str | None = None,
    ) -> None:
        color = status_color(status_code)
        formatted = (
            f"{_Colors.BOLD}{method}{_Colors.RESET} "
            f"{color}{status_code}{_Colors.RESET} "
            f"{path} {_Colors.GRAY}{elapsed_ms:.0f}ms - {client or '-'}{_Colors.RESET}"
        )
        if status_code >= 500:
            self._logger.error(formatted)
        else:
            self._logger.info(formatted)
