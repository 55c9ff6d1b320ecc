from functools import lru_cache

from pydantic import Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration loaded from environment or .env.

    Every option has a default, so an empty environment is a valid one.
    """

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")
    pokeapi_base_url: str = Field(default="https://pokeapi.co/api/v2", alias="POKEAPI_BASE_URL")
    translation_api_base_url: str = Field(
        default="https://api.funtranslations.com/translate", alias="TRANSLATION_API_BASE_URL"
    )
    # Per outbound call
    http_timeout: PositiveFloat = Field(default=10.0, alias="HTTP_TIMEOUT_SECS")
    # Whole request, both upstream calls included
    request_timeout: PositiveFloat = Field(default=30.0, alias="REQUEST_TIMEOUT_SECS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    @field_validator("pokeapi_base_url", "translation_api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return cached service settings."""
    return Settings()
