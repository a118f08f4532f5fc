"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from compound_calc.app.api.routes import api_bp
from compound_calc.config import AppConfig, get_config
from compound_calc.logger import configure_logging


def create_app(config: Optional[AppConfig] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or get_config()
    log = configure_logging(config.LOG_LEVEL)

    app = Flask(__name__)
    app.config["CALC"] = config

    CORS(
        app,
        resources={rf"{config.API_PREFIX}/*": {"origins": config.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix=config.API_PREFIX)
    log.info("Application created", extra={"api_prefix": config.API_PREFIX})
    return app
