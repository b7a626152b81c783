from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

# Project root (the directory holding alembic.ini and the default SQLite file)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = f"sqlite:///{_PROJECT_ROOT / 'data.db'}"

    # App
    APP_NAME: str = "Budget Tracker"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # CORS — can be overridden with the CORS_ORIGINS env var as a JSON array
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
