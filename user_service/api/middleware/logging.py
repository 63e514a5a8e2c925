# 📄 File: user_service/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# This file keeps a short diary of every request made to the User Service, recording what was
# asked for, how long it took and how it ended, without ever writing down passwords.
# 🧪 Purpose (Technical Summary):
# Request logging middleware that assigns or propagates an X-Request-ID, binds it to the
# logging context for the duration of the request and logs method, path, status and timing.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, logging, time, user_service.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# user_service.main (middleware registration)

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from user_service.shared.utils.logging import log_context

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Headers and bodies are not logged: they carry Basic credentials and
    plaintext passwords.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.request_id_header = "X-Request-ID"
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(self.request_id_header.lower()) or None

        with log_context(request_id) as request_id:
            request.state.request_id = request_id
            start_time = time.perf_counter()
            logger.info(f"{request.method} {request.url.path} started")

            try:
                response = await call_next(request)
            except Exception:
                processing_time = time.perf_counter() - start_time
                logger.exception(
                    f"{request.method} {request.url.path} failed after {processing_time * 1000:.2f}ms"
                )
                raise

            processing_time = time.perf_counter() - start_time
            level = logging.WARNING if processing_time > self.slow_request_threshold else logging.INFO
            logger.log(
                level,
                f"{request.method} {request.url.path} -> {response.status_code} "
                f"in {processing_time * 1000:.2f}ms",
            )

            response.headers[self.request_id_header] = request_id
            return response
