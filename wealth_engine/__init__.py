"""Wealth Analytics Flask Application Factory."""

import logging
from typing import Optional

from flask import Flask

from wealth_engine.config import get_global_settings


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, testing, production)

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["DATABASE_URL"] = settings.db_url
    app.config["ENV"] = config_name or settings.flask_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["DEFAULT_CURRENT_AGE"] = settings.default_current_age

    logging.basicConfig(level=settings.log_level)
    app.logger.setLevel(settings.log_level)

    # Register blueprints
    from wealth_engine.blueprints.health import health_bp
    from wealth_engine.blueprints.wealth import wealth_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(wealth_bp)

    return app
