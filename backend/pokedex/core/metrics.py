"""Prometheus Metrics.

This module defines and exports Prometheus metrics for monitoring the application.
Metrics include counters, gauges and histograms for tracking:
- API requests and responses
- Upstream API calls (PokeAPI, FunTranslations)
- Translation fallbacks
"""

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Gauge,
    Histogram,
    Info,
    generate_latest,
)

# ========================================
# API Metrics
# ========================================

http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

http_requests_in_progress = Gauge(
    'http_requests_in_progress',
    'Number of HTTP requests currently being processed',
    ['method', 'endpoint']
)

# ========================================
# Upstream API Metrics
# ========================================

upstream_requests_total = Counter(
    'upstream_requests_total',
    'Total requests to upstream APIs',
    ['upstream', 'outcome']
)

upstream_request_duration_seconds = Histogram(
    'upstream_request_duration_seconds',
    'Upstream API request duration in seconds',
    ['upstream'],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0)
)

translation_fallbacks_total = Counter(
    'translation_fallbacks_total',
    'Translated lookups that kept the original description',
    ['reason']
)

# ========================================
# Application Info
# ========================================

app_info = Info(
    'app',
    'Application information'
)


def set_app_info(version: str, environment: str):
    """Set application information for Prometheus.

    Call this during app startup.
    """
    app_info.info({
        'version': version,
        'environment': environment,
        'service': 'pokedex-api'
    })


def get_metrics():
    """Get current Prometheus metrics in text format.

    Use this for the /metrics endpoint.
    """
    return generate_latest()


def get_content_type():
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
