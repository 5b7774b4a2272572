import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from schooladmin.logging_config import generate_request_id, get_logger, set_principal_id, set_request_id

logger = get_logger("http")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id (X-Request-ID, generated when absent),
    logs method, path, status and duration, and echoes the id back.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or generate_request_id()
        set_request_id(request_id)
        set_principal_id("")

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.error(
                "HTTP %s %s - unhandled error (%.2fms)",
                request.method, request.url.path, duration_ms,
                exc_info=True,
                extra={"http_status": 500, "duration_ms": round(duration_ms, 2)},
            )
            raise
        duration_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "HTTP %s %s - %s (%.2fms)",
            request.method, request.url.path, response.status_code, duration_ms,
            extra={"http_status": response.status_code, "duration_ms": round(duration_ms, 2)},
        )
        response.headers["X-Request-ID"] = request_id
        return response
