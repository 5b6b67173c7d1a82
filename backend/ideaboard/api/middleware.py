"""Request logging: one log line per request with method, path, status and duration."""

import logging
import time

from fastapi import FastAPI, Request, status

logger = logging.getLogger("ideaboard.requests")


def _log_request(request: Request, status_code: int, started: float) -> None:
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        f"{request.method} {request.url.path} {status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )


def register_request_logging(app: FastAPI) -> None:
    """Attach the request-logging middleware to the app."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors become a 500 in ServerErrorMiddleware, outside this one
            _log_request(request, status.HTTP_500_INTERNAL_SERVER_ERROR, started)
            raise
        _log_request(request, response.status_code, started)
        return response
