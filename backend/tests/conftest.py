"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules.
Upstream APIs are never called: provider tests use httpx.MockTransport and API
tests replace the lookup service through FastAPI dependency overrides.
"""

import os
from collections.abc import Callable

import httpx
import pytest
import pytest_asyncio

os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from pokedex.api.dependencies import get_pokemon_service  # noqa: E402
from pokedex.main import app  # noqa: E402
from pokedex.providers import PokeApiClient, TranslationClient, build_async_client  # noqa: E402
from pokedex.services.pokemon_service import PokemonService  # noqa: E402

POKEAPI_URL = "http://pokeapi.test/api/v2"
TRANSLATION_URL = "http://translations.test/translate"

Handler = Callable[[httpx.Request], httpx.Response]


def species_payload(
    name: str = "pikachu",
    flavor_text: str | None = "A\nB",
    language: str = "en",
    habitat: str | None = "forest",
    is_legendary: bool = False,
) -> dict:
    """Build a PokeAPI /pokemon-species payload."""
    entries = []
    if flavor_text is not None:
        entries.append({
            "flavor_text": flavor_text,
            "language": {"name": language, "url": f"https://pokeapi.co/api/v2/language/{language}/"},
            "version": {"name": "red", "url": "https://pokeapi.co/api/v2/version/1/"},
        })
    return {
        "id": 25,
        "name": name,
        "habitat": {"name": habitat, "url": "https://pokeapi.co/api/v2/pokemon-habitat/2/"} if habitat else None,
        "flavor_text_entries": entries,
        "is_legendary": is_legendary,
        "is_mythical": False,
    }


def translation_payload(translated: str, translation: str = "shakespeare") -> dict:
    """Build a FunTranslations response payload."""
    return {
        "success": {"total": 1},
        "contents": {"translated": translated, "text": "original", "translation": translation},
    }


def make_pokeapi_client(handler: Handler) -> PokeApiClient:
    """PokeApiClient whose HTTP calls are answered by handler."""
    return PokeApiClient(build_async_client(POKEAPI_URL, transport=httpx.MockTransport(handler)))


def make_translation_client(handler: Handler) -> TranslationClient:
    """TranslationClient whose HTTP calls are answered by handler."""
    return TranslationClient(build_async_client(TRANSLATION_URL, transport=httpx.MockTransport(handler)))


@pytest.fixture()
def make_species():
    """Factory building PokeAPI species payloads"""
    return species_payload


@pytest.fixture()
def make_translation():
    """Factory building FunTranslations response payloads"""
    return translation_payload


@pytest.fixture()
def pokeapi_factory():
    """Factory building a PokeApiClient answered by a handler function"""
    return make_pokeapi_client


@pytest.fixture()
def translation_factory():
    """Factory building a TranslationClient answered by a handler function"""
    return make_translation_client


@pytest.fixture()
def use_service():
    """Install a PokemonService (or a double) as the service behind the API"""
    def install(service: PokemonService) -> None:
        app.dependency_overrides[get_pokemon_service] = lambda: service

    return install


@pytest_asyncio.fixture
async def client():
    """Create an API test client backed by the ASGI app"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        try:
            yield ac
        finally:
            app.dependency_overrides.clear()
