"""
Runtime configuration.

Settings are read from environment variables; a local ``.env`` file is loaded
first so the AI key never has to live in the source tree.

Environment:
    GEMINI_API_KEY / GOOGLE_GENAI_API_KEY: key for the generative-AI client.
        Without one, every AI flow serves its static fallback content.
    INVESTCALC_AI_MODEL: model name passed to the client.
    INVESTCALC_CORS_ORIGINS: comma-separated origins allowed on /api/*.
    INVESTCALC_LOG_LEVEL, INVESTCALC_LOG_FILE: logging setup.
    INVESTCALC_HOST, INVESTCALC_PORT, INVESTCALC_DEBUG: dev server.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_AI_MODEL = "gemini-2.0-flash"
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


class Settings(BaseModel):
    ai_api_key: Optional[str] = None
    ai_model: str = DEFAULT_AI_MODEL
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    log_file: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def _split_csv(raw: Optional[str]) -> Optional[List[str]]:
    if raw is None:
        return None
    items = [item.strip() for item in raw.split(",")]
    return [item for item in items if item]


def load_settings() -> Settings:
    """Build Settings from the environment (and .env, if present)."""
    load_dotenv()

    values = {
        "ai_api_key": os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_GENAI_API_KEY") or None,
        "ai_model": os.getenv("INVESTCALC_AI_MODEL"),
        "cors_origins": _split_csv(os.getenv("INVESTCALC_CORS_ORIGINS")),
        "log_level": os.getenv("INVESTCALC_LOG_LEVEL"),
        "log_file": os.getenv("INVESTCALC_LOG_FILE"),
        "host": os.getenv("INVESTCALC_HOST"),
        "port": os.getenv("INVESTCALC_PORT"),
        "debug": os.getenv("INVESTCALC_DEBUG"),
    }
    # unset variables fall back to the model defaults
    return Settings.model_validate({key: value for key, value in values.items() if value is not None})
