"""Request Timeout Middleware.

Bounds the time spent serving one inbound request. A request that runs past
the configured limit is cancelled, which also aborts any upstream call it is
awaiting, and answered with 504.

Written as a plain ASGI middleware so the route handler runs in the task the
timeout cancels.
"""

import asyncio

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ..core.config import settings
from ..core.constants import ErrorMessages
from ..core.logging import get_logger, get_request_id
from ..schemas.pokemon import ErrorResponse

logger = get_logger(__name__)


class RequestTimeoutMiddleware:
    """Middleware that cancels requests exceeding the inbound request timeout."""

    def __init__(self, app: ASGIApp, timeout_seconds: float | None = None):
        """Initialize middleware with optional custom timeout.

        Args:
            app: The ASGI application
            timeout_seconds: Optional custom timeout in seconds.
                           If None, uses settings.REQUEST_TIMEOUT_SECS
        """
        self.app = app
        if timeout_seconds is None:
            self.timeout_seconds = settings.REQUEST_TIMEOUT_SECS
        else:
            self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            async with asyncio.timeout(self.timeout_seconds) as deadline:
                await self.app(scope, receive, send_wrapper)
        except TimeoutError:
            if not deadline.expired():
                raise

            logger.error(
                "Request timed out",
                extra={
                    'method': scope["method"],
                    'path': scope["path"],
                    'timeout_seconds': self.timeout_seconds,
                    'response_started': response_started
                }
            )
            # Headers already went out; the response cannot be replaced
            if response_started:
                raise

            response = JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content=ErrorResponse(
                    error=ErrorMessages.REQUEST_TIMEOUT.format(timeout=self.timeout_seconds),
                    request_id=get_request_id()
                ).model_dump(exclude_none=True)
            )
            await response(scope, receive, send)
