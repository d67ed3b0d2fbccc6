"""Colored request logger — ANSI-colored console lines for inbound HTTP requests.

Color scheme (by response status):
    🟢 Green   — 2xx
    🔵 Cyan    — 3xx
    🟡 Yellow  — 4xx
    🔴 Red     — 5xx and unhandled errors
    ⚪ Gray    — Timing
"""

import logging
import time
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


def _status_color(status_code: int) -> str:
    if status_code >= 500:
        return _Colors.RED
    if status_code >= 400:
        return _Colors.YELLOW
    if status_code >= 300:
        return _Colors.CYAN
    return _Colors.GREEN


# ── RequestLogger ────────────────────────────────────────────────────

class RequestLogger:
    """Color-coded one-line-per-request logger.

    Usage:
        log = RequestLogger()
        log.completed("GET", "/api/v1/warranties", 200, 12.4)
    """

    def __init__(self, name: str = "gateway.requests"):
        self._logger = logging.getLogger(name)

    def completed(self, method: str, path: str, status_code: int, elapsed_ms: float) -> None:
        color = _status_color(status_code)
        formatted = (
            f"{_Colors.BOLD}{method}{_Colors.RESET} {path} "
            f"{color}{status_code}{_Colors.RESET} "
            f"{_Colors.GRAY}{elapsed_ms:.1f}ms{_Colors.RESET}"
        )
        if status_code >= 500:
            self._logger.error(formatted)
        elif status_code >= 400:
            self._logger.warning(formatted)
        else:
            self._logger.info(formatted)

    def failed(self, method: str, path: str, error: Exception, elapsed_ms: float) -> None:
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{method} {path} ❌{_Colors.RESET} "
            f"{_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET} "
            f"{_Colors.GRAY}{elapsed_ms:.1f}ms{_Colors.RESET}"
        )
        self._logger.error(formatted)

    async def middleware(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """HTTP middleware: time the request and log its outcome."""
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            self.failed(request.method, request.url.path, e, (time.perf_counter() - start) * 1000)
            raise
        self.completed(
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response
