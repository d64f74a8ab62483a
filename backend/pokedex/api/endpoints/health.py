"""Health Endpoints.

Liveness and readiness probes.
"""

from fastapi import APIRouter, Depends

from ...core.config import settings
from ...core.constants import ApiEndpoints, ServiceStatus
from ...schemas.pokemon import ErrorResponse, HealthResponse
from ...services.pokemon_service import PokemonService
from ..dependencies import get_pokemon_service

router = APIRouter()


@router.get(ApiEndpoints.HEALTH, response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe. Does not touch upstream APIs."""
    return HealthResponse(status=ServiceStatus.HEALTHY, service=settings.APP_NAME)


@router.get(
    ApiEndpoints.READINESS,
    response_model=HealthResponse,
    responses={500: {"model": ErrorResponse, "description": "An upstream API is unreachable"}},
)
async def readiness_check(
    service: PokemonService = Depends(get_pokemon_service)
) -> HealthResponse:
    """Readiness probe. Ready only when PokeAPI and FunTranslations both answer."""
    await service.check_readiness()
    return HealthResponse(status=ServiceStatus.READY, service=settings.APP_NAME)
