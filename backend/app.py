#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: cd backend && flask --app app run --port 5000 --debug

"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from api.routes import api_bp
from config import Settings, load_settings
from logging_setup import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["FI_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": list(settings.cors_origins)}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("app created: env=%s origins=%s", settings.env, ",".join(settings.cors_origins))
    return app


app = create_app()


if __name__ == "__main__":
    app.run(port=app.config["FI_SETTINGS"].port, debug=app.config["FI_SETTINGS"].debug)
