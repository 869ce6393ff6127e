from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import AppSettings, GeminiModels


class Settings(BaseSettings):
    """Application settings loaded from environment + defaults"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Optional: a missing key is reported per request, not at startup
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: GeminiModels = AppSettings.GEMINI_MODEL
    GEMINI_BASE_URL: str = AppSettings.GEMINI_BASE_URL
    API_VERSION: str = AppSettings.API_VERSION
    GEMINI_TIMEOUT: float | None = AppSettings.GEMINI_TIMEOUT
    ENVIRONMENT: str = "development"
    CORS_ORIGINS: List[str] = ["*"]

    @property
    def has_api_key(self) -> bool:
        return bool(self.GEMINI_API_KEY)

    @property
    def gemini_config(self) -> dict:
        return {
            "api_key": self.GEMINI_API_KEY or "",
            "model": self.GEMINI_MODEL.value,
            "base_url": self.GEMINI_BASE_URL,
            "api_version": self.API_VERSION,
            "timeout": self.GEMINI_TIMEOUT,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
