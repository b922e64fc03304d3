from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env", ".env-model"),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="AI Gateway", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_model: str = Field(default="gemini-2.0-flash-exp", alias="GEMINI_MODEL")

    # Upper bound for a single generateContent call.
    gemini_timeout_seconds: float = Field(
        default=30, gt=0, alias="GEMINI_TIMEOUT_SECONDS"
    )
    # Pause before each token of a simulated stream.
    stream_chunk_delay_ms: int = Field(default=50, ge=0, alias="STREAM_CHUNK_DELAY_MS")

    @property
    def gemini_timeout_ms(self) -> int:
        # google-genai expects HttpOptions.timeout in milliseconds
        return int(self.gemini_timeout_seconds * 1000)

    @property
    def stream_chunk_delay_seconds(self) -> float:
        return self.stream_chunk_delay_ms / 1000


@lru_cache
def get_settings() -> Settings:
    return Settings()
