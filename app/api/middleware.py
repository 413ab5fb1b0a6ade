"""
Request logging middleware: one structured `http_request` line per request.
"""
import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.core.config import settings
from app.utils.metrics import http_request_duration_seconds, http_requests_total

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and latency; carries a request id.

    The id is taken from the configured request id header when the edge
    layer sends one, otherwise generated, and echoed on the response.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        header = settings.request_id_header
        request_id = request.headers.get(header) or uuid.uuid4().hex
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "http_request_failed",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "method": request.method,
                    "error": type(e).__name__,
                },
            )
            raise

        elapsed = time.perf_counter() - started
        http_request_duration_seconds.observe(elapsed)
        http_requests_total.labels(method=request.method, status=str(response.status_code)).inc()
        logger.info(
            "http_request",
            extra={
                "request_id": request_id,
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "latency_ms": round(elapsed * 1000, 2),
            },
        )
        response.headers[header] = request_id
        return response
