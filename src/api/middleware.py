"""
Global middleware.
"""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_middleware(app: FastAPI, enable_request_logging: bool = True) -> None:
    """Attach app-level middleware."""

    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "status": "error",
                    "code": "INTERNAL_ERROR",
                    "message": "Server error",
                },
            )

    if enable_request_logging:

        @app.middleware("http")
        async def request_timer(request: Request, call_next):
            start = time.perf_counter()
            response = await call_next(request)
            elapsed = time.perf_counter() - start
            response.headers["X-Process-Time"] = f"{elapsed:.4f}"
            logger.info(
                "%s %s %s %.3fs",
                request.method,
                request.url.path,
                response.status_code,
                elapsed,
            )
            return response
