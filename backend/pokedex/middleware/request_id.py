"""Request ID Middleware.

Outermost middleware. Binds a request ID to every inbound request so all log
lines and error bodies produced while serving it can be correlated, and is
the last line of defence for exceptions no handler claimed.
"""

import re
import time

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.constants import ErrorMessages, HttpHeaders
from ..core.logging import get_logger, set_request_id
from ..schemas.pokemon import ErrorResponse

logger = get_logger(__name__)

# Caller-supplied IDs are echoed in headers and logs, so only accept plain tokens
_VALID_REQUEST_ID = re.compile(r'^[A-Za-z0-9._:-]{1,128}$')


def _incoming_request_id(request: Request) -> str | None:
    value = request.headers.get(HttpHeaders.REQUEST_ID)
    if value and _VALID_REQUEST_ID.match(value):
        return value
    return None


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log its start and completion.

    A valid X-Request-ID sent by the caller is reused, otherwise a new one is
    generated. The ID is returned in the X-Request-ID response header along
    with X-Process-Time.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = set_request_id(_incoming_request_id(request))
        start_time = time.perf_counter()

        logger.info(
            "Request started",
            extra={
                'method': request.method,
                'path': request.url.path,
                'client': request.client.host if request.client else 'unknown'
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Unhandled error while serving request",
                extra={
                    'error': str(e),
                    'error_type': type(e).__name__,
                    'process_time': time.perf_counter() - start_time
                },
                exc_info=True
            )
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=ErrorResponse(
                    error=ErrorMessages.INTERNAL_SERVER_ERROR,
                    request_id=request_id
                ).model_dump(exclude_none=True)
            )
        else:
            logger.info(
                "Request completed",
                extra={
                    'status_code': response.status_code,
                    'process_time': time.perf_counter() - start_time
                }
            )

        response.headers[HttpHeaders.REQUEST_ID] = request_id
        response.headers[HttpHeaders.PROCESS_TIME] = f"{time.perf_counter() - start_time:.6f}"
        return response
