"""API Router.

Aggregates all endpoints.
"""

from fastapi import APIRouter

from ..core.constants import ApiEndpoints
from .endpoints import health, metrics, pokemon

api_router = APIRouter()

api_router.include_router(
    pokemon.router,
    prefix=ApiEndpoints.POKEMON,
    tags=["Pokemon"]
)

api_router.include_router(
    health.router,
    tags=["Health"]
)

api_router.include_router(
    metrics.router,
    tags=["Metrics"]
)
