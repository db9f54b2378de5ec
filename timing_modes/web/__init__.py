from __future__ import annotations

from flask import Flask


def create_app() -> Flask:
    app = Flask(__name__)
    app.config.setdefault("DEFAULT_STEPS", 11)
    app.config.setdefault("MAX_STEPS", 1001)
    app.config.setdefault("PLOT_STEPS", 201)
    app.config.setdefault("MAX_PLOT_SIZE", 4096)

    from .views import bp as views_bp

    app.register_blueprint(views_bp)
    return app
