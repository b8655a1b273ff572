"""Runtime settings loaded from the environment (prefix ``POLYTRANSLATE_``)."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POLYTRANSLATE_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "polytranslate"
    log_level: str = "INFO"
    detector_backend: Literal["langdetect", "lingua"] = "langdetect"
    min_detection_length: int = 3
    # Service id -> priority, applied beneath per-request overrides.
    service_priorities: Dict[str, int] = {}


@lru_cache()
def get_settings() -> Settings:
    return Settings()
