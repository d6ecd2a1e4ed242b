# inventory_api/core/config.py

import os
from functools import lru_cache
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


def _parse_origin_list(value):
    if value in (None, "", []):
        return []
    if isinstance(value, str):
        return [origin.strip() for origin in value.split(",") if origin.strip()]
    if isinstance(value, (list, tuple, set)):
        return [str(origin).strip() for origin in value if str(origin).strip()]
    return []


class Settings(BaseSettings):
    """
    Application settings.
    Loads values from environment variables (.env file)
    """
    APP_TITLE: str = "Inventory API"

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Stock rules
    DEFAULT_MIN_THRESHOLD: int = 10     # low-stock alert level for new stock records
    STOCK_CONFLICT_STATUS_CODE: int = 409   # 400 reproduces the legacy behaviour

    # CORS, comma-separated
    CORS_ORIGINS: str = (
        "http://localhost:3000,http://127.0.0.1:3000,"
        "http://localhost:5173,http://127.0.0.1:5173"
    )

    model_config = SettingsConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env'),
        case_sensitive=True,
        extra="ignore"
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return _parse_origin_list(self.CORS_ORIGINS)


@lru_cache()
def get_settings():
    """Cached settings to avoid loading .env file for every request"""
    return Settings()

def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
