"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from investcalc.app.api.routes import api_bp
from investcalc.config import Settings, load_settings
from investcalc.domain.registry import CalculatorRegistry
from investcalc.flows.base import GenerativeClient
from investcalc.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _build_ai_client(settings: Settings) -> Optional[GenerativeClient]:
    if not settings.ai_api_key:
        logger.warning("No AI API key configured; AI content will use static fallbacks.")
        return None

    from investcalc.flows.gemini import GeminiClient

    logger.info("AI flows enabled with model %s", settings.ai_model)
    return GeminiClient(api_key=settings.ai_api_key, model=settings.ai_model)


def create_app(
    settings: Optional[Settings] = None,
    ai_client: Optional[GenerativeClient] = None,
    registry: Optional[CalculatorRegistry] = None,
) -> Flask:
    """Build the Flask app instance."""
    if settings is None:
        settings = load_settings()
    setup_logging(settings.log_level_value, settings.log_file)

    app = Flask(__name__)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    if ai_client is None:
        ai_client = _build_ai_client(settings)

    app.extensions["investcalc"] = {
        "settings": settings,
        "registry": registry or CalculatorRegistry(),
        "ai_client": ai_client,
    }

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("investcalc API ready with %d calculators", len(app.extensions["investcalc"]["registry"]))
    return app
