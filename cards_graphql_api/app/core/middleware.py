"""
Request logging middleware.

Every HTTP request is logged once when it starts and once when it
completes, tagged with a short request id so that the two lines can be
correlated in the console output.
"""

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        req_id = str(uuid.uuid4())[:8]
        start = time.time()
        logger.debug(
            "request_started req_id=%s method=%s path=%s client=%s",
            req_id,
            request.method,
            request.url.path,
            request.client.host if request.client else None,
        )
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("request_failed req_id=%s", req_id)
            raise
        duration_ms = round((time.time() - start) * 1000, 2)
        logger.info(
            "%s %s -> %s (%sms) req_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            req_id,
        )
        return response
