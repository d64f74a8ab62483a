"""Pokedex API - Main Application.

Serves pokemon species data from PokeAPI, optionally with descriptions
translated by FunTranslations.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.error_handlers import register_exception_handlers
from .api.router import api_router
from .core.config import settings
from .core.constants import ApiEndpoints
from .core.logging import get_logger, setup_logging
from .core.metrics import set_app_info
from .core.tracing import setup_tracing
from .middleware import PrometheusMiddleware, RequestIDMiddleware, RequestTimeoutMiddleware
from .providers import PokeApiClient, TranslationClient, build_async_client
from .services.pokemon_service import PokemonService

# Setup logging
setup_logging()
logger = get_logger(__name__)


def create_pokemon_service() -> PokemonService:
    """Build the lookup service and the pooled HTTP clients it owns."""
    return PokemonService(
        pokeapi=PokeApiClient(build_async_client(settings.POKEAPI_BASE_URL)),
        translator=TranslationClient(build_async_client(settings.TRANSLATION_API_BASE_URL)),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info(
        "Application starting",
        extra={
            'environment': settings.ENVIRONMENT,
            'version': settings.APP_VERSION,
            'pokeapi_base_url': settings.POKEAPI_BASE_URL,
            'translation_api_base_url': settings.TRANSLATION_API_BASE_URL
        }
    )

    set_app_info(
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT
    )
    logger.debug("Prometheus metrics initialized")

    setup_tracing()

    app.state.pokemon_service = create_pokemon_service()
    logger.debug("Upstream HTTP clients initialized")

    yield

    logger.info("Application shutting down")

    await app.state.pokemon_service.aclose()
    logger.debug("Upstream HTTP clients closed")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Pokemon species lookup with Yoda and Shakespeare translations",
    lifespan=lifespan,
    docs_url=ApiEndpoints.DOCS,
    redoc_url=ApiEndpoints.REDOC,
    openapi_url=ApiEndpoints.OPENAPI
)

register_exception_handlers(app)

# Middleware added last runs first: request ID, then metrics, then timeout
app.add_middleware(RequestTimeoutMiddleware)
app.add_middleware(PrometheusMiddleware)
app.add_middleware(RequestIDMiddleware)

app.include_router(api_router)


def run():
    """Run the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "pokedex.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
