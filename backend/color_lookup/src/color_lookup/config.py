import logging
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuration settings for the Color Lookup service.
    Settings are loaded from environment variables and/or a .env file.
    """

    # --- General Service Settings ---
    SERVICE_NAME: str = Field(default="color_lookup", description="Name of the service.")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level for the service."
    )
    API_VERSION: str = Field(default="v1", description="API version prefix for REST endpoints.")

    # --- API Server Settings ---
    API_HOST: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server to."
    )
    API_PORT: int = Field(
        default=8010,
        description="Port to bind the API server to."
    )
    CORS_ALLOWED_ORIGINS: List[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed by the CORS middleware."
    )

    model_config = SettingsConfigDict(
        env_file=".env",  # Load .env file if present
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra environment variables
        case_sensitive=False,
    )


settings = Settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(settings.SERVICE_NAME)

logger.debug(f"Color Lookup service settings loaded: {settings.model_dump()}")

if __name__ == "__main__":
    print("Loaded Color Lookup Service Settings:")
    for field_name, value in settings.model_dump().items():
        print(f"  {field_name}: {value}")
