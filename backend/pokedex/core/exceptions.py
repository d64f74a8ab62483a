"""Custom Exceptions for Upstream Error Handling.

This module defines the error taxonomy of the service. Every error that can
reach a client is a PokedexError subclass carrying the HTTP status it maps to:

- NotFoundError: the requested pokemon does not exist upstream (404)
- ExternalApiError: an upstream returned a bad status, an unreadable body,
  or could not be reached (502)
- UpstreamTimeoutError: an outbound call exceeded its deadline (504)
- InternalError: a local failure such as a failed readiness check (500)

Errors raised by the translation client never reach clients: the translated
lookup recovers from them and keeps the original description.
"""

from fastapi import status


class PokedexError(Exception):
    """Base exception for all service errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PokedexError):
    """Requested pokemon is absent from the upstream catalog."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class ExternalApiError(PokedexError):
    """Upstream protocol, status or payload failure.

    Carries the upstream HTTP status when one was received.
    """

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class UpstreamTimeoutError(PokedexError):
    """Outbound call exceeded its deadline."""

    status_code = status.HTTP_504_GATEWAY_TIMEOUT


class InternalError(PokedexError):
    """Local invariant violation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
