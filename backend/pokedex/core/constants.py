"""Application Constants.

Centralized constants used throughout the application.
This file contains all hardcoded values that should be maintained in one place.
"""

# ============================================================================
# SERVICE CONSTANTS
# ============================================================================

class ServiceStatus:
    """Liveness and readiness status values."""
    HEALTHY = "healthy"
    READY = "ready"


# ============================================================================
# UPSTREAM API CONSTANTS
# ============================================================================

class Upstream:
    """Names used to label upstream APIs in logs and metrics."""
    POKEAPI = "pokeapi"
    TRANSLATION = "funtranslations"


class PokeApi:
    """PokeAPI paths and payload values."""
    SPECIES_PATH = "/pokemon-species/{name}"
    # Bulbasaur, always present in the catalog
    HEALTH_CHECK_PATH = "/pokemon-species/1"
    DESCRIPTION_LANGUAGE = "en"


class TranslationApi:
    """FunTranslations paths and payload values."""
    TRANSLATE_PATH = "/{translator}.json"
    HEALTH_CHECK_TRANSLATOR = "shakespeare"
    HEALTH_CHECK_TEXT = "test"


class TranslationRules:
    """Inputs that decide which translator is used."""
    YODA_HABITAT = "cave"


# ============================================================================
# HTTP CLIENT CONSTANTS
# ============================================================================

class HttpPool:
    """Connection pool settings shared by the upstream HTTP clients."""
    MAX_KEEPALIVE_CONNECTIONS = 10
    KEEPALIVE_EXPIRY = 90.0


# ============================================================================
# UPSTREAM CALL OUTCOMES
# ============================================================================

class UpstreamOutcome:
    """Outcome labels for upstream request metrics."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    INVALID_RESPONSE = "invalid_response"
    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    TRANSPORT_ERROR = "transport_error"


# ============================================================================
# ERROR MESSAGES
# ============================================================================

class ErrorMessages:
    """Standard error messages."""
    INTERNAL_SERVER_ERROR = "Internal server error"
    POKEMON_NOT_FOUND = "Pokemon '{name}' not found"
    POKEAPI_TIMEOUT = "Request to PokeAPI timed out: {error}"
    POKEAPI_CONNECT = "Failed to connect to PokeAPI: {error}"
    POKEAPI_FETCH = "Failed to fetch pokemon: {error}"
    POKEAPI_STATUS = "PokeAPI returned status: {status}"
    POKEAPI_PARSE = "Failed to parse pokemon data: {error}"
    TRANSLATION_TIMEOUT = "Translation request timed out: {error}"
    TRANSLATION_FAILED = "Translation request failed: {error}"
    TRANSLATION_STATUS = "Translation API returned status: {status}"
    TRANSLATION_PARSE = "Failed to parse translation response: {error}"
    HEALTH_CHECK_FAILED = "Health check failed: {error}"
    NOT_READY = "Service not ready: {failures}"
    REQUEST_TIMEOUT = "Request exceeded {timeout}s timeout"


# ============================================================================
# HTTP CONSTANTS
# ============================================================================

class HttpHeaders:
    """HTTP header names."""
    REQUEST_ID = "X-Request-ID"
    PROCESS_TIME = "X-Process-Time"
    USER_AGENT = "User-Agent"
    ACCEPT = "Accept"


class HttpStatusCodes:
    """HTTP status code constants."""
    INTERNAL_SERVER_ERROR = 500


# ============================================================================
# API ENDPOINTS
# ============================================================================

class ApiEndpoints:
    """API endpoint paths."""
    DOCS = "/docs"
    REDOC = "/redoc"
    OPENAPI = "/openapi.json"
    HEALTH = "/health"
    READINESS = "/readiness"
    POKEMON = "/pokemon"


# ============================================================================
# PATH NORMALIZATION CONSTANTS
# ============================================================================

class PathNormalization:
    """Constants for path normalization in metrics."""
    NAME_PLACEHOLDER = "{name}"


# ============================================================================
# METRICS CONSTANTS
# ============================================================================

class Metrics:
    """Metrics-related constants."""
    ENDPOINT_PATH = "/metrics"
