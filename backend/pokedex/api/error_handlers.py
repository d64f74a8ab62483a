"""Exception handlers that turn service errors into JSON responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.constants import HttpHeaders
from ..core.exceptions import PokedexError
from ..core.logging import get_logger, get_request_id
from ..schemas.pokemon import ErrorResponse

logger = get_logger(__name__)


async def handle_pokedex_error(request: Request, exc: PokedexError) -> JSONResponse:
    """Handle PokedexError instances.

    Logs the error server-side and answers with the mapped status code and a
    body holding only the human-readable message and the request ID.

    Args:
        request: FastAPI request object
        exc: PokedexError instance

    Returns:
        JSONResponse: Formatted error response
    """
    request_id = get_request_id()

    logger.error(
        "Request failed",
        extra={
            'error': exc.message,
            'error_type': type(exc).__name__,
            'status_code': exc.status_code,
            'path': request.url.path
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message, request_id=request_id).model_dump(exclude_none=True),
        headers={HttpHeaders.REQUEST_ID: request_id}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the service exception handlers on the application."""
    app.add_exception_handler(PokedexError, handle_pokedex_error)
