from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    groq_api_key: Optional[str] = os.getenv("GROQ_API_KEY") or None
    groq_api_url: str = os.getenv(
        "GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions"
    )
    groq_model: str = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    enhancer_variant: str = os.getenv("ENHANCER_VARIANT", "structured")
    # None means "use the variant's own temperature"
    temperature: Optional[float] = _optional_float("MODEL_TEMPERATURE")
    max_tokens: int = int(os.getenv("MODEL_MAX_TOKENS", "2048"))
    timeout_seconds: float = float(os.getenv("MODEL_TIMEOUT_SECONDS", "60"))
    prompt_store: str = os.getenv("PROMPT_STORE", "memory")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
