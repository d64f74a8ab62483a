"""Prometheus Middleware.

Records request count, latency and concurrency for every inbound request
except the metrics scrape itself.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from ..core.constants import HttpStatusCodes, Metrics
from ..core.metrics import (
    http_request_duration_seconds,
    http_requests_in_progress,
    http_requests_total,
)
from ..utils.converters import normalize_path


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Capture HTTP metrics labelled by method, endpoint and status code.

    Pokemon names in paths are replaced with a placeholder so label
    cardinality stays bounded however many species are looked up.
    """

    def __init__(self, app, excluded_paths: tuple[str, ...] = (Metrics.ENDPOINT_PATH,)):
        super().__init__(app)
        self.excluded_paths = excluded_paths

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.excluded_paths:
            return await call_next(request)

        labels = {'method': request.method, 'endpoint': normalize_path(request.url.path)}
        in_progress = http_requests_in_progress.labels(**labels)
        in_progress.inc()

        status_code = HttpStatusCodes.INTERNAL_SERVER_ERROR
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            http_request_duration_seconds.labels(**labels).observe(time.perf_counter() - start_time)
            http_requests_total.labels(status_code=status_code, **labels).inc()
            in_progress.dec()
