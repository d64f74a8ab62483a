"""FastAPI Dependencies.

Provides the request orchestrator to endpoints. The service is built once in
the application lifespan and stored on app.state; tests override
get_pokemon_service to inject doubles.
"""

from fastapi import Request

from ..core.constants import ErrorMessages
from ..core.exceptions import InternalError
from ..services.pokemon_service import PokemonService


def get_pokemon_service(request: Request) -> PokemonService:
    """Dependency returning the application's PokemonService.

    Raises:
        InternalError: If the application started without a service
    """
    service = getattr(request.app.state, "pokemon_service", None)
    if service is None:
        raise InternalError(ErrorMessages.INTERNAL_SERVER_ERROR)
    return service
