"""HTTP middleware — request access logging."""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from news_api.infrastructure.logging.colored_logger import AccessLogger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, status, path, latency and client address for every request."""

    def __init__(self, app, access_logger: AccessLogger | None = None):
        super().__init__(app)
        self._access = access_logger or AccessLogger()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            path = request.url.path
            if request.url.query:
                path = f"{path}?{request.url.query}"
            client = request.client.host if request.client else None
            self._access.request(request.method, status_code, path, elapsed_ms, client)
