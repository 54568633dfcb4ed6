"""
Request Context Middleware

Tags every log line written while handling a request with a request id,
method and path, and logs one summary line per request.

The id is taken from an incoming X-Request-ID header when present and
echoed back on the response.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from acrossmedia.shared.core.logging import clear_log_context, get_logger, log_context

logger = get_logger("http")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 1)

        logger.info("Request completed", status_code=response.status_code, duration_ms=elapsed_ms)
        response.headers[REQUEST_ID_HEADER] = request_id
        clear_log_context()
        return response
