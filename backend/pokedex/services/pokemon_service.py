"""Pokemon Lookup Service.

Composes the PokeAPI and FunTranslations providers for each inbound request.

Lookups:
- Plain: fetch the species and return it, propagating any PokeAPI error
- Translated: fetch the species, then rewrite its description with the
  selected translator. Translation failures never reach the caller; the
  original description is kept instead.
"""

import asyncio

from ..core.constants import ErrorMessages, Upstream
from ..core.exceptions import InternalError
from ..core.logging import get_logger
from ..core.metrics import translation_fallbacks_total
from ..core.tracing import get_tracer
from ..domain.translation import select_translation_style
from ..providers.funtranslations import TranslationClient
from ..providers.pokeapi import PokeApiClient
from ..schemas.pokemon import Pokemon

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class PokemonService:
    """Request orchestrator for pokemon lookups.

    Holds no per-request state; one instance serves all concurrent requests.
    """

    def __init__(self, pokeapi: PokeApiClient, translator: TranslationClient):
        self.pokeapi = pokeapi
        self.translator = translator

    async def get_pokemon(self, name: str) -> Pokemon:
        """Look up a pokemon.

        Args:
            name: Pokemon name, any case

        Returns:
            Pokemon record

        Raises:
            NotFoundError, ExternalApiError, UpstreamTimeoutError: from PokeAPI, unchanged
        """
        with tracer.start_as_current_span("pokemon.fetch") as span:
            span.set_attribute("pokemon.name", name)
            return await self.pokeapi.fetch_pokemon(name)

    async def get_translated_pokemon(self, name: str) -> Pokemon:
        """Look up a pokemon and translate its description.

        The translation is only attempted once PokeAPI succeeded and returned
        an English description. If translation fails for any reason the record
        is returned with its original description.

        Args:
            name: Pokemon name, any case

        Returns:
            Pokemon record, with a translated description when translation succeeded

        Raises:
            NotFoundError, ExternalApiError, UpstreamTimeoutError: from PokeAPI, unchanged
        """
        pokemon = await self.get_pokemon(name)

        if pokemon.description is None:
            logger.debug(
                "No English description, skipping translation",
                extra={'pokemon': pokemon.name}
            )
            return pokemon

        with tracer.start_as_current_span("pokemon.translate") as span:
            span.set_attribute("pokemon.name", pokemon.name)
            span.set_attribute(
                "translator",
                select_translation_style(pokemon.habitat, pokemon.is_legendary).value
            )
            span.set_attribute("text_length", len(pokemon.description))

            try:
                translated = await self.translator.translate(
                    pokemon.description,
                    pokemon.habitat,
                    pokemon.is_legendary
                )
            except Exception as e:
                translation_fallbacks_total.labels(reason=type(e).__name__).inc()
                logger.warning(
                    "Translation failed, keeping original description",
                    extra={
                        'pokemon': pokemon.name,
                        'error': str(e),
                        'error_type': type(e).__name__
                    }
                )
                return pokemon

        return pokemon.model_copy(update={'description': translated})

    async def check_readiness(self) -> None:
        """Check that both upstream APIs are reachable.

        Raises:
            InternalError: If either upstream health check failed
        """
        results = await asyncio.gather(
            self.pokeapi.health_check(),
            self.translator.health_check(),
            return_exceptions=True
        )

        failures = [
            f"{upstream}: {result}"
            for upstream, result in zip((Upstream.POKEAPI, Upstream.TRANSLATION), results)
            if isinstance(result, Exception)
        ]
        if failures:
            raise InternalError(ErrorMessages.NOT_READY.format(failures="; ".join(failures)))

    async def aclose(self) -> None:
        """Release the providers' connection pools."""
        await self.pokeapi.aclose()
        await self.translator.aclose()
