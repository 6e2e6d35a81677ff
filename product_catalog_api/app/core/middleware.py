"""
Request logging middleware.

Each request gets a short identifier which is echoed back in the
``X-Request-ID`` response header and included in the log lines, so
a client report can be matched against the server log.  This covers
failures too: an unhandled exception is logged with its traceback
and answered here with a 500 that carries the same identifier.
"""

import logging
import time
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = uuid4().hex
        start_time = time.perf_counter()
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request %s %s %s failed after %.4fs",
                request_id,
                request.method,
                request.url.path,
                time.perf_counter() - start_time,
            )
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": "Internal server error", "request_id": request_id},
            )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        elapsed = time.perf_counter() - start_time
        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            "Request %s %s %s -> %s (%.4fs)",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
