"""Application factory and app-wide configuration."""

import time
from typing import Optional

from flask import Flask
from flask_cors import CORS

from sr_calculator.app.api.routes import api_bp
from sr_calculator.core.config import Settings, load_settings
from sr_calculator.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SR_SETTINGS"] = settings
    app.config["SR_STARTED_AT"] = time.monotonic()

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("app created env=%s version=%s", settings.env, settings.version)
    return app
