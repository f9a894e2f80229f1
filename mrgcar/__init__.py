# mrgcar/__init__.py
from __future__ import annotations

from flask import Flask

from .config import get_settings
from .db import init_db, init_engine
from .errors import register_error_handlers
from .logger import setup_logging
from .middleware import init_request_logger
from .routes import register_routes


def create_app(database_url: str | None = None) -> Flask:
    settings = get_settings()
    setup_logging(settings)

    app = Flask(__name__)
    app.config["APP_ENV"] = settings.app_env
    # Turkish content must come out readable, not \u-escaped
    app.json.ensure_ascii = False

    if database_url:
        init_engine(database_url)
    init_db()

    # request logger first so it wraps every other hook
    init_request_logger(app)
    register_error_handlers(app)
    register_routes(app)

    return app
