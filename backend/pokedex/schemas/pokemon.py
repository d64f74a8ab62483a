"""Pydantic Schemas for API Responses and Upstream Payloads.

These schemas handle serialization of the API responses and validation of
the PokeAPI and FunTranslations payloads. Upstream payloads carry many more
fields than we read; extra fields are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# API RESPONSES
# ============================================================================

class Pokemon(BaseModel):
    """Pokemon record returned by the lookup endpoints."""
    name: str = Field(..., min_length=1)
    description: str | None = None
    habitat: str | None = None
    is_legendary: bool = False


class ErrorResponse(BaseModel):
    """Standard error response schema."""
    error: str
    request_id: str | None = None


class HealthResponse(BaseModel):
    """Liveness and readiness response schema."""
    status: str
    service: str


# ============================================================================
# POKEAPI PAYLOADS
# ============================================================================

class NamedResource(BaseModel):
    """PokeAPI reference to another resource, such as a language or habitat."""
    model_config = ConfigDict(extra="ignore")

    name: str


class FlavorTextEntry(BaseModel):
    """One localized description of a species."""
    model_config = ConfigDict(extra="ignore")

    flavor_text: str
    language: NamedResource


class PokeApiSpecies(BaseModel):
    """Subset of the PokeAPI /pokemon-species payload used by the service."""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    habitat: NamedResource | None = None
    flavor_text_entries: list[FlavorTextEntry]
    is_legendary: bool


# ============================================================================
# FUNTRANSLATIONS PAYLOADS
# ============================================================================

class TranslationRequest(BaseModel):
    """Body sent to a FunTranslations translator."""
    text: str


class TranslationContents(BaseModel):
    model_config = ConfigDict(extra="ignore")

    translated: str


class TranslationResponse(BaseModel):
    """Subset of the FunTranslations response used by the service."""
    model_config = ConfigDict(extra="ignore")

    contents: TranslationContents
