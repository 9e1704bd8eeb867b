"""
Environment variables and settings.
- Read once at startup; the instance is frozen afterwards.
"""

import os

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

DEFAULT_MODELS = [
    "google/gemini-flash-1.5",
    "google/gemini-flash-1.5-8b",
    "meta-llama/llama-3.2-3b-instruct:free",
    "microsoft/phi-3-mini-128k-instruct:free",
]


def _default_referer() -> str:
    return os.environ.get("RAILWAY_PUBLIC_DOMAIN") or "https://railway.app"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    PROJECT_NAME: str = "SSC PYQ Quiz Generator"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])

    # OpenRouter (OpenAI-compatible API)
    OPENROUTER_API_KEY: str | None = None
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_MODELS: list[str] = Field(default_factory=lambda: list(DEFAULT_MODELS))
    OPENROUTER_HTTP_REFERER: str = Field(default_factory=_default_referer)
    OPENROUTER_TITLE: str = "SSC Quiz Bot"
    OPENROUTER_TEMPERATURE: float = 0.2
    OPENROUTER_MAX_TOKENS: int = 1200
    REQUEST_TIMEOUT: float = Field(default=5.0, gt=0)

    # Quiz shape
    QUESTION_COUNT: int = Field(default=5, ge=1)
    TOPIC_MAX_LENGTH: int = Field(default=200, ge=3)

    @field_validator("OPENROUTER_MODELS")
    @classmethod
    def models_not_empty(cls, v: list[str]) -> list[str]:
        models = [m.strip() for m in v if m and m.strip()]
        if not models:
            raise ValueError("OPENROUTER_MODELS must contain at least one model")
        return models

    @property
    def api_key_configured(self) -> bool:
        return bool(self.OPENROUTER_API_KEY)


settings = Settings()
