"""Prometheus Metrics Endpoint."""

from fastapi import APIRouter, Response

from ...core.constants import Metrics
from ...core.metrics import get_content_type, get_metrics

router = APIRouter()


@router.get(Metrics.ENDPOINT_PATH, include_in_schema=False)
async def prometheus_metrics() -> Response:
    """Expose request, upstream and translation fallback metrics for scraping."""
    return Response(content=get_metrics(), media_type=get_content_type())
