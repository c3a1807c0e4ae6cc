"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "Stoloto Lottery Advisor"
    APP_ENV: str = "development"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 5001
    LOG_FILE: str = "logs/app.log"
    REQUEST_TIMEOUT_SECONDS: float = 30.0
    CORS_ORIGINS: list[str] = ["http://localhost:5000", "http://localhost:5001"]

    # Upstream catalog (StolotoAPI)
    STOLOTO_API_URL: str = "http://localhost:8080"
    STOLOTO_DRAWS_PATH: str = "/api/draws/"
    STOLOTO_TIMEOUT_SECONDS: float = 10.0
    STOLOTO_MAX_RETRIES: int = 3
    STOLOTO_RETRY_DELAY_SECONDS: float = 0.5

    # Catalog cache
    CATALOG_CACHE_TTL_SECONDS: float = 300.0

    # Recommendations
    RECOMMENDATION_THRESHOLD: int = 50


settings = Settings()
