"""
MODULE OVERVIEW:
The request-wide middleware stack: crash recovery and access logging.
CORS comes straight from Starlette and is wired in `main.py`.

WHAT IS HAPPENING HERE:
`RecoveryMiddleware` sits outermost. If anything below it raises, the client
gets a plain 500 and the traceback goes to the log, instead of the exception
unwinding into the server. `RequestLoggingMiddleware` times every request,
writes one log line per request and exposes the latency as `X-Process-Time-Ms`.
"""

import time
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger


class RecoveryMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Recovered from unhandled error on {request.method} {request.url.path}")
            return JSONResponse({"error": "Internal Server Error"}, status_code=500)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time-Ms"] = f"{process_time_ms:.2f}"

        logger.info(f"{response.status_code} - {process_time_ms:.2f}ms {request.method} {request.url.path}")

        return response
