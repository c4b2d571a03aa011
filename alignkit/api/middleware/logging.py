"""Request logging middleware."""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("alignkit.api")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses.

    Logs method, path, response status and timing for every request.
    """

    def __init__(self, app, exclude_paths: list[str] | None = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or ["/health"]

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request with logging."""
        if any(request.url.path.startswith(p) for p in self.exclude_paths):
            return await call_next(request)

        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()
        method = request.method
        path = request.url.path

        logger.info(f"[{request_id}] {method} {path}")
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            duration = (time.time() - start_time) * 1000
            logger.error(f"[{request_id}] {method} {path} - ERROR - {duration:.2f}ms - {str(e)}")
            raise

        duration = (time.time() - start_time) * 1000
        status = response.status_code
        log_level = logging.INFO if status < 400 else logging.WARNING if status < 500 else logging.ERROR
        logger.log(log_level, f"[{request_id}] {method} {path} - {status} - {duration:.2f}ms")

        response.headers["X-Request-ID"] = request_id
        return response
