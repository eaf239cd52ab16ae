"""
Application configuration from environment variables.
No secrets in defaults or logs.
"""
from functools import lru_cache
from typing import Literal, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_STRAPI_URL = "http://localhost:1337"
DEFAULT_API_TOKEN = "dev-token"

# Collections the public (unauthenticated) role may read
PUBLIC_READ_COLLECTIONS: Tuple[str, ...] = (
    "about-institute",
    "institution",
    "program",
    "program-section",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Base URL used for absolute media URLs and health checks
    strapi_url: str = Field(
        default=DEFAULT_STRAPI_URL,
        description="Public base URL of the content service (STRAPI_URL)"
    )

    # Service configuration
    service_env: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        description="Service environment"
    )

    # Write authentication
    api_token: str = Field(
        default=DEFAULT_API_TOKEN,
        validate_default=True,
        description="Bearer token accepted on create/update endpoints"
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=1337, description="Server port")

    # Permission bootstrap
    public_read_collections: Tuple[str, ...] = Field(
        default=PUBLIC_READ_COLLECTIONS,
        description="Collections granted public find/findOne at startup"
    )

    @field_validator("strapi_url", mode="before")
    @classmethod
    def validate_strapi_url(cls, v: str) -> str:
        """Fall back to the local default when STRAPI_URL is blank."""
        if v is None or not str(v).strip():
            return DEFAULT_STRAPI_URL
        return str(v).strip().rstrip("/")

    @field_validator("api_token", mode="after")
    @classmethod
    def validate_token_not_default_in_prod(cls, v: str, info) -> str:
        """Prevent the development token from being accepted in production."""
        service_env = info.data.get("service_env", "dev")
        if v == DEFAULT_API_TOKEN and service_env == "prod":
            raise ValueError(
                "SECURITY ERROR: API_TOKEN must be set when SERVICE_ENV=prod. "
                "The development token would open write endpoints."
            )
        return v

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
