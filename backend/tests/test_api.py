"""
Integration Tests for API Endpoints

Tests the FastAPI application endpoints end to end through the ASGI app.
The lookup service is either a real PokemonService over mocked upstream
transports or an AsyncMock double, installed with the use_service fixture.
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from pokedex.core.exceptions import (
    ExternalApiError,
    InternalError,
    NotFoundError,
    UpstreamTimeoutError,
)
from pokedex.services.pokemon_service import PokemonService


@pytest.fixture()
def install_upstreams(use_service, pokeapi_factory, translation_factory):
    """Install a real PokemonService whose upstreams are answered by handlers"""
    def install(pokeapi_handler, translation_handler=None):
        if translation_handler is None:
            def translation_handler(request: httpx.Request) -> httpx.Response:
                raise AssertionError("translation API must not be called")

        use_service(PokemonService(
            pokeapi=pokeapi_factory(pokeapi_handler),
            translator=translation_factory(translation_handler),
        ))

    return install


class TestPokemonEndpoint:
    """Test suite for GET /pokemon/{name}"""

    @pytest.mark.asyncio()
    async def test_get_pokemon(self, client, install_upstreams, make_species):
        """Test a known pokemon is returned with a normalized description"""
        install_upstreams(lambda request: httpx.Response(200, json=make_species()))

        response = await client.get("/pokemon/pikachu")

        assert response.status_code == 200
        assert response.json() == {
            "name": "pikachu",
            "description": "A B",
            "habitat": "forest",
            "is_legendary": False,
        }

    @pytest.mark.asyncio()
    async def test_get_pokemon_lowercases_upstream_path(self, client, install_upstreams, make_species):
        """Test the name is lower-cased for PokeAPI"""
        paths = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            return httpx.Response(200, json=make_species(name="mewtwo", habitat="rare", is_legendary=True))

        install_upstreams(handler)

        response = await client.get("/pokemon/MewTwo")

        assert response.status_code == 200
        assert response.json()["name"] == "mewtwo"
        assert response.json()["is_legendary"] is True
        assert paths == ["/api/v2/pokemon-species/mewtwo"]

    @pytest.mark.asyncio()
    async def test_get_pokemon_without_habitat_or_description(self, client, install_upstreams, make_species):
        """Test absent habitat and description serialize as null"""
        install_upstreams(lambda request: httpx.Response(
            200, json=make_species(flavor_text="Texte", language="fr", habitat=None)
        ))

        response = await client.get("/pokemon/pikachu")

        assert response.status_code == 200
        assert response.json()["description"] is None
        assert response.json()["habitat"] is None

    @pytest.mark.asyncio()
    async def test_get_pokemon_not_found(self, client, install_upstreams):
        """Test an unknown pokemon returns 404 with the error body"""
        install_upstreams(lambda request: httpx.Response(404, text="Not Found"))

        response = await client.get("/pokemon/missingno")

        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "Pokemon 'missingno' not found"
        assert data["request_id"] == response.headers["X-Request-ID"]
        assert set(data) == {"error", "request_id"}

    @pytest.mark.asyncio()
    async def test_get_pokemon_upstream_error(self, client, install_upstreams):
        """Test a PokeAPI server error returns 502"""
        install_upstreams(lambda request: httpx.Response(500))

        response = await client.get("/pokemon/pikachu")

        assert response.status_code == 502
        assert "500" in response.json()["error"]

    @pytest.mark.asyncio()
    async def test_get_pokemon_invalid_payload(self, client, install_upstreams):
        """Test an unreadable PokeAPI body returns 502"""
        install_upstreams(lambda request: httpx.Response(200, text="<html>"))

        response = await client.get("/pokemon/pikachu")

        assert response.status_code == 502

    @pytest.mark.asyncio()
    async def test_get_pokemon_empty_name_payload(self, client, install_upstreams, make_species):
        """Test a PokeAPI payload with an empty name returns 502"""
        install_upstreams(lambda request: httpx.Response(200, json=make_species(name="")))

        response = await client.get("/pokemon/pikachu")

        assert response.status_code == 502
        assert response.json()["error"].startswith("Failed to parse pokemon data")

    @pytest.mark.asyncio()
    async def test_get_pokemon_upstream_timeout(self, client, install_upstreams):
        """Test a PokeAPI timeout returns 504"""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        install_upstreams(handler)

        response = await client.get("/pokemon/pikachu")

        assert response.status_code == 504
        assert "timed out" in response.json()["error"]

    @pytest.mark.asyncio()
    async def test_get_pokemon_connection_failure(self, client, install_upstreams):
        """Test an unreachable PokeAPI returns 502"""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        install_upstreams(handler)

        response = await client.get("/pokemon/pikachu")

        assert response.status_code == 502
        assert "Failed to connect to PokeAPI" in response.json()["error"]


class TestTranslatedPokemonEndpoint:
    """Test suite for GET /pokemon/translated/{name}"""

    @pytest.mark.asyncio()
    async def test_shakespeare_translation(self, client, install_upstreams, make_species, make_translation):
        """Test an ordinary pokemon gets the Shakespeare translation"""
        paths = []

        def translation_handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            return httpx.Response(200, json=make_translation("A, B, forsooth"))

        install_upstreams(lambda request: httpx.Response(200, json=make_species()), translation_handler)

        response = await client.get("/pokemon/translated/pikachu")

        assert response.status_code == 200
        assert response.json()["description"] == "A, B, forsooth"
        assert paths == ["/translate/shakespeare.json"]

    @pytest.mark.asyncio()
    @pytest.mark.parametrize("habitat,is_legendary", [
        ("cave", False),
        ("rare", True),
        ("cave", True),
    ])
    async def test_yoda_translation(self, client, install_upstreams, make_species, make_translation,
                                    habitat, is_legendary):
        """Test cave dwellers and legendary pokemon get the Yoda translation"""
        paths = []

        def translation_handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            return httpx.Response(200, json=make_translation("B, A is", translation="yoda"))

        install_upstreams(
            lambda request: httpx.Response(200, json=make_species(habitat=habitat, is_legendary=is_legendary)),
            translation_handler,
        )

        response = await client.get("/pokemon/translated/zubat")

        assert response.status_code == 200
        assert response.json()["description"] == "B, A is"
        assert paths == ["/translate/yoda.json"]

    @pytest.mark.asyncio()
    async def test_translation_failure_returns_original(self, client, install_upstreams, make_species):
        """Test a translation error status falls back to the standard description"""
        install_upstreams(
            lambda request: httpx.Response(200, json=make_species()),
            lambda request: httpx.Response(429, json={"error": {"code": 429, "message": "Too Many Requests"}}),
        )

        response = await client.get("/pokemon/translated/pikachu")

        assert response.status_code == 200
        assert response.json()["description"] == "A B"

    @pytest.mark.asyncio()
    async def test_translation_timeout_returns_original(self, client, install_upstreams, make_species):
        """Test a translation timeout falls back to the standard description"""
        def translation_handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        install_upstreams(lambda request: httpx.Response(200, json=make_species()), translation_handler)

        response = await client.get("/pokemon/translated/pikachu")

        assert response.status_code == 200
        assert response.json()["description"] == "A B"

    @pytest.mark.asyncio()
    async def test_not_found_skips_translation(self, client, install_upstreams):
        """Test an unknown pokemon returns 404 without calling the translator"""
        install_upstreams(lambda request: httpx.Response(404))

        response = await client.get("/pokemon/translated/missingno")

        assert response.status_code == 404
        assert response.json()["error"] == "Pokemon 'missingno' not found"

    @pytest.mark.asyncio()
    async def test_no_description_skips_translation(self, client, install_upstreams, make_species):
        """Test a pokemon without an English description is returned untranslated"""
        install_upstreams(lambda request: httpx.Response(200, json=make_species(flavor_text=None)))

        response = await client.get("/pokemon/translated/pikachu")

        assert response.status_code == 200
        assert response.json()["description"] is None


class TestErrorMapping:
    """Test suite for mapping service errors to HTTP responses"""

    @pytest.mark.asyncio()
    @pytest.mark.parametrize("error,expected_status", [
        (NotFoundError("Pokemon 'x' not found", name="x"), 404),
        (ExternalApiError("PokeAPI returned status: 503", upstream_status=503), 502),
        (UpstreamTimeoutError("Request to PokeAPI timed out: timed out"), 504),
        (InternalError("Internal server error"), 500),
    ])
    async def test_status_mapping(self, client, use_service, error, expected_status):
        """Test each error kind maps to its HTTP status with its message"""
        service = MagicMock(spec=PokemonService)
        service.get_pokemon = AsyncMock(side_effect=error)
        use_service(service)

        response = await client.get("/pokemon/x")

        assert response.status_code == expected_status
        assert response.json()["error"] == error.message

    @pytest.mark.asyncio()
    async def test_request_id_is_echoed(self, client, use_service):
        """Test a caller-supplied X-Request-ID is used for the response and error body"""
        service = MagicMock(spec=PokemonService)
        service.get_pokemon = AsyncMock(side_effect=NotFoundError("Pokemon 'x' not found", name="x"))
        use_service(service)

        response = await client.get("/pokemon/x", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
        assert response.json()["request_id"] == "req-123"

    @pytest.mark.asyncio()
    async def test_invalid_request_id_is_replaced(self, client):
        """Test a malformed X-Request-ID is not echoed back"""
        response = await client.get("/health", headers={"X-Request-ID": "bad id<script>"})

        assert response.headers["X-Request-ID"] != "bad id<script>"
        assert response.headers["X-Request-ID"]

    @pytest.mark.asyncio()
    async def test_request_id_is_generated(self, client):
        """Test a request ID is generated when none is supplied"""
        response = await client.get("/health")

        assert response.headers["X-Request-ID"]
        assert "X-Process-Time" in response.headers

    @pytest.mark.asyncio()
    async def test_unexpected_error_returns_500(self, client, use_service):
        """Test an unexpected exception is answered with a generic 500"""
        service = MagicMock(spec=PokemonService)
        service.get_pokemon = AsyncMock(side_effect=RuntimeError("boom"))
        use_service(service)

        response = await client.get("/pokemon/x")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert "boom" not in response.text

    @pytest.mark.asyncio()
    async def test_missing_service_returns_500(self, client):
        """Test requests fail with 500 when the application has no service"""
        response = await client.get("/pokemon/pikachu")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"


class TestHealthEndpoints:
    """Test suite for liveness, readiness and metrics endpoints"""

    @pytest.mark.asyncio()
    async def test_health(self, client):
        """Test liveness never touches upstreams"""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "pokedex-api"}

    @pytest.mark.asyncio()
    async def test_readiness_ready(self, client, use_service):
        """Test readiness when both upstreams are reachable"""
        service = MagicMock(spec=PokemonService)
        service.check_readiness = AsyncMock(return_value=None)
        use_service(service)

        response = await client.get("/readiness")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "service": "pokedex-api"}

    @pytest.mark.asyncio()
    async def test_readiness_with_upstream_error_statuses(self, client, install_upstreams):
        """Test any HTTP answer from the upstreams counts as reachable"""
        install_upstreams(lambda request: httpx.Response(503), lambda request: httpx.Response(429))

        response = await client.get("/readiness")

        assert response.status_code == 200

    @pytest.mark.asyncio()
    async def test_readiness_not_ready(self, client, install_upstreams):
        """Test readiness fails with 500 when an upstream is unreachable"""
        def translation_handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        install_upstreams(lambda request: httpx.Response(200, json={}), translation_handler)

        response = await client.get("/readiness")

        assert response.status_code == 500
        assert "funtranslations" in response.json()["error"]

    @pytest.mark.asyncio()
    async def test_metrics(self, client, use_service):
        """Test Prometheus metrics are exposed with request counters"""
        service = MagicMock(spec=PokemonService)
        service.get_pokemon = AsyncMock(side_effect=NotFoundError("Pokemon 'x' not found", name="x"))
        use_service(service)
        await client.get("/pokemon/x")

        response = await client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "http_requests_total" in response.text
        assert 'endpoint="/pokemon/{name}"' in response.text

    @pytest.mark.asyncio()
    async def test_openapi_docs(self, client):
        """Test the OpenAPI schema lists the lookup endpoints"""
        response = await client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/pokemon/{name}" in paths
        assert "/pokemon/translated/{name}" in paths
