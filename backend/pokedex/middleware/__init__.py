"""Middleware modules for the application."""

from .prometheus import PrometheusMiddleware
from .request_id import RequestIDMiddleware
from .request_timeout import RequestTimeoutMiddleware

__all__ = ["PrometheusMiddleware", "RequestIDMiddleware", "RequestTimeoutMiddleware"]
