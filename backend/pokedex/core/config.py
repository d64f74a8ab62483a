"""Application Configuration.

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "pokedex-api"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # Server
    HOST: str = Field(default="0.0.0.0", description="Address the HTTP server binds to")
    PORT: int = Field(default=5000, ge=1, le=65535, description="Port the HTTP server binds to")

    # Upstream APIs
    POKEAPI_BASE_URL: str = Field(
        default="https://pokeapi.co/api/v2",
        min_length=8,
        description="Base URL of the PokeAPI species catalog"
    )
    TRANSLATION_API_BASE_URL: str = Field(
        default="https://api.funtranslations.com/translate",
        min_length=8,
        description="Base URL of the FunTranslations API"
    )

    # Timeouts
    HTTP_TIMEOUT_SECS: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for each outbound HTTP call, in seconds"
    )
    REQUEST_TIMEOUT_SECS: float = Field(
        default=30.0,
        gt=0,
        description="Maximum time allowed to serve one inbound request, in seconds"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Distributed Tracing
    TRACING_ENABLED: bool = Field(
        default=False,
        description="Enable distributed tracing with OpenTelemetry"
    )
    TRACING_EXPORTER: str = Field(
        default="console",
        description="Tracing exporter: 'console' for development, 'otlp' for production"
    )
    TRACING_OTLP_ENDPOINT: str = Field(
        default="http://localhost:4318/v1/traces",
        description="OTLP endpoint for trace export (Jaeger, Zipkin, etc.)"
    )

    @field_validator('POKEAPI_BASE_URL', 'TRANSLATION_API_BASE_URL', mode='after')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Store base URLs without a trailing slash so paths can be appended."""
        return v.rstrip("/")

    @field_validator('LOG_LEVEL', mode='after')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate LOG_LEVEL is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got '{v}'")
        return level

    @property
    def user_agent(self) -> str:
        """User-Agent header sent on every upstream request."""
        return f"{self.APP_NAME}/{self.APP_VERSION}"


settings = Settings()
