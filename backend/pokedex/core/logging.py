"""Structured JSON Logging Configuration.

Every log line is a JSON object carrying the ID of the inbound request it
belongs to, so the PokeAPI and FunTranslations calls made for one lookup can
be correlated. Trace and span IDs are added when tracing is active.
"""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from ..utils import generate_request_id
from .config import settings
from .tracing import get_span_id, get_trace_id

NO_REQUEST_ID = 'no-request-id'

request_id_var: ContextVar[str] = ContextVar('request_id', default=NO_REQUEST_ID)

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter adding service, request and trace context to each record."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = settings.APP_NAME
        log_record['environment'] = settings.ENVIRONMENT
        log_record['request_id'] = request_id_var.get()

        trace_id = get_trace_id()
        if trace_id:
            log_record['trace_id'] = trace_id
            log_record['span_id'] = get_span_id()

        if record.levelno >= logging.WARNING:
            log_record['location'] = f"{record.filename}:{record.lineno} {record.funcName}"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Install the JSON handler on the root logger.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL

    Returns:
        The root logger
    """
    level = (level or settings.LOG_LEVEL).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter(
        '%(message)s',
        timestamp=True
    ))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, root.level))

    root.debug("Logging configured", extra={'log_level': level})
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a module logger; configure output once with setup_logging()."""
    return logging.getLogger(name)


def set_request_id(request_id: str | None = None) -> str:
    """Bind a request ID to the current context, generating one if needed.

    Returns:
        The request ID now in effect
    """
    request_id = request_id or generate_request_id()
    request_id_var.set(request_id)
    return request_id


def get_request_id() -> str:
    return request_id_var.get()
