"""StoreRate — Configuration via pydantic-settings."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./storerate.db"
    DB_ECHO: bool = False  # log SQL at INFO once configure_logging() has run

    # Security
    BCRYPT_ROUNDS: int = 12
    AUTH_TOKEN_BYTES: int = 18  # 24 url-safe characters

    # Ratings
    HIGHLY_RATED_THRESHOLD: float = 4.0
    RECENT_RATINGS_LIMIT: int = 5

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
