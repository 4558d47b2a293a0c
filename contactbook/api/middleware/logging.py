"""Request/response logging middleware."""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger("contactbook.api")


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request, including the ones a handler blew up on."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Rendered as a 500 by the server error handler further out.
            self._log(request, status.HTTP_500_INTERNAL_SERVER_ERROR, started, level=logging.ERROR)
            raise

        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        self._log(request, response.status_code, started, level=level)
        return response

    @staticmethod
    def _log(request: Request, status_code: int, started: float, *, level: int) -> None:
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.log(
            level,
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            status_code,
            duration_ms,
            extra={
                "path": request.url.path,
                "method": request.method,
                "status": status_code,
                "duration_ms": duration_ms,
                "client": request.client.host if request.client else None,
            },
        )
