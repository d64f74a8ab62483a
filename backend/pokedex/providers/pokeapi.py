"""PokeAPI Species Provider.

Fetches species data from PokeAPI and maps it to the Pokemon record served by
the API. The description is the first English flavor text, normalized so it
holds no line breaks or repeated spaces.
"""

from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..core.constants import (
    ErrorMessages,
    PokeApi,
    Upstream,
    UpstreamOutcome,
)
from ..core.exceptions import (
    ExternalApiError,
    NotFoundError,
    PokedexError,
    UpstreamTimeoutError,
)
from ..schemas.pokemon import PokeApiSpecies, Pokemon
from ..utils.strings import normalize_text
from .base import UpstreamProvider


class PokeApiClient(UpstreamProvider):
    """Client for the PokeAPI /pokemon-species endpoint."""

    def __init__(self, client: httpx.AsyncClient):
        super().__init__(provider_name=Upstream.POKEAPI, client=client)

    async def fetch_pokemon(self, name: str) -> Pokemon:
        """Fetch a pokemon species by name.

        The name is lower-cased to build the upstream path. The returned record
        keeps the name exactly as PokeAPI spells it.

        Args:
            name: Pokemon name, any case

        Returns:
            Pokemon record

        Raises:
            NotFoundError: PokeAPI answered 404
            UpstreamTimeoutError: The call timed out
            ExternalApiError: Any other status, connection or payload failure
        """
        path = PokeApi.SPECIES_PATH.format(name=quote(name.lower(), safe=""))
        response = await self._request("GET", path)

        if response.status_code == httpx.codes.NOT_FOUND:
            self._record_outcome(UpstreamOutcome.NOT_FOUND)
            raise NotFoundError(ErrorMessages.POKEMON_NOT_FOUND.format(name=name), name=name)

        if not response.is_success:
            self._record_outcome(UpstreamOutcome.HTTP_ERROR)
            raise ExternalApiError(
                ErrorMessages.POKEAPI_STATUS.format(status=response.status_code),
                upstream_status=response.status_code
            )

        try:
            species = PokeApiSpecies.model_validate_json(response.content)
        except ValidationError as e:
            self._record_outcome(UpstreamOutcome.INVALID_RESPONSE)
            raise ExternalApiError(ErrorMessages.POKEAPI_PARSE.format(error=e)) from e

        self._record_outcome(UpstreamOutcome.SUCCESS)
        return map_species(species)

    async def health_check(self) -> None:
        """Verify PokeAPI answers requests.

        Raises:
            ExternalApiError: If PokeAPI could not be reached
        """
        await self._probe("GET", PokeApi.HEALTH_CHECK_PATH)

    def _transport_error(self, error: httpx.HTTPError) -> PokedexError:
        if isinstance(error, httpx.TimeoutException):
            return UpstreamTimeoutError(ErrorMessages.POKEAPI_TIMEOUT.format(error=error))
        if isinstance(error, httpx.ConnectError):
            return ExternalApiError(ErrorMessages.POKEAPI_CONNECT.format(error=error))
        return ExternalApiError(ErrorMessages.POKEAPI_FETCH.format(error=error))


def map_species(species: PokeApiSpecies) -> Pokemon:
    """Map a PokeAPI species payload to a Pokemon record."""
    description = next(
        (
            normalize_text(entry.flavor_text)
            for entry in species.flavor_text_entries
            if entry.language.name == PokeApi.DESCRIPTION_LANGUAGE
        ),
        None
    )

    return Pokemon(
        name=species.name,
        description=description,
        habitat=species.habitat.name if species.habitat else None,
        is_legendary=species.is_legendary,
    )
