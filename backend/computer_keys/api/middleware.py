"""HTTP Middleware: request deadline and access logging.

Invariants:
    - Every request runs under a deadline of REQUEST_TIMEOUT_SECONDS; on expiry the
      handler task is cancelled (its session rolls back) and 503 is returned
    - The 503 is only sent when no response bytes went out before the deadline
    - Every request is logged once with method, path, status and duration

Design Decisions:
    - Deadline is plain ASGI: the wrapped app runs inside the awaited task, so
      cancelling it reaches the route handler and its dependencies
"""

import asyncio
import logging
import time

from fastapi import FastAPI, Request, status
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from computer_keys.api.error_handlers import error_response
from computer_keys.core import messages

logger = logging.getLogger(__name__)


class RequestDeadlineMiddleware:
    """Cancel any HTTP request that outlives timeout_seconds."""

    def __init__(self, app: ASGIApp, timeout_seconds: float) -> None:
        self.app = app
        self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await asyncio.wait_for(
                self.app(scope, receive, send_tracking), self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(
                f"Request exceeded {self.timeout_seconds}s deadline",
                extra={"path": scope.get("path"), "method": scope.get("method")},
            )
            if response_started:
                return
            response = error_response(
                status.HTTP_503_SERVICE_UNAVAILABLE, messages.REQUEST_TIMED_OUT,
            )
            await response(scope, receive, send)


def register_middleware(app: FastAPI, timeout_seconds: float) -> None:
    """Attach deadline and access-log middleware to the app."""
    app.add_middleware(RequestDeadlineMiddleware, timeout_seconds=timeout_seconds)

    # Registered last so it runs outermost and sees the deadline's 503 too
    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return response
