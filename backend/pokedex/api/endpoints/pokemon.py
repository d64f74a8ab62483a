"""Pokemon Endpoints.

Lookup endpoints for pokemon species, plain and with a translated description.
"""

from fastapi import APIRouter, Depends

from ...core.logging import get_logger
from ...schemas.pokemon import ErrorResponse, Pokemon
from ...services.pokemon_service import PokemonService
from ..dependencies import get_pokemon_service

logger = get_logger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Pokemon not found"},
    502: {"model": ErrorResponse, "description": "Upstream API error"},
    504: {"model": ErrorResponse, "description": "Upstream API timed out"},
}


@router.get(
    "/translated/{name}",
    response_model=Pokemon,
    summary="Get a pokemon with a translated description",
    responses=ERROR_RESPONSES,
)
async def get_translated_pokemon(
    name: str,
    service: PokemonService = Depends(get_pokemon_service)
) -> Pokemon:
    """Get a pokemon whose description is translated.

    Cave dwellers and legendary pokemon get Yoda's voice, every other pokemon
    gets Shakespeare's. If the translation fails the standard description is
    returned.
    """
    logger.info("Fetching translated pokemon", extra={'pokemon': name})
    return await service.get_translated_pokemon(name)


@router.get(
    "/{name}",
    response_model=Pokemon,
    summary="Get a pokemon",
    responses=ERROR_RESPONSES,
)
async def get_pokemon(
    name: str,
    service: PokemonService = Depends(get_pokemon_service)
) -> Pokemon:
    """Get a pokemon's name, description, habitat and legendary status."""
    logger.info("Fetching pokemon", extra={'pokemon': name})
    return await service.get_pokemon(name)
