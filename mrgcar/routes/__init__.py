# =============================================================================
# File: mrgcar/routes/__init__.py
# Purpose: Group and register every API blueprint.
# =============================================================================
from __future__ import annotations

from flask import Flask

from .api_cars import bp as cars_bp
from .api_forum import bp as forum_bp
from .api_misc import bp as misc_bp
from .api_news import bp as news_bp


def register_routes(app: Flask) -> None:
    """Register every API blueprint on the Flask app."""
    app.register_blueprint(misc_bp)
    app.register_blueprint(cars_bp,  url_prefix="/v1/cars")
    app.register_blueprint(forum_bp, url_prefix="/v1/forum")
    app.register_blueprint(news_bp,  url_prefix="/v1/news")
