# icecube_api/main.py
from __future__ import annotations

import logging

import click
from flask import Flask
from flask_cors import CORS

from icecube_api.api.middlewares.error_handler import register_error_handlers
from icecube_api.api.routes import register_routes
from icecube_api.config.flask_config import configure_app
from icecube_api.config.settings import settings
from icecube_api.infrastructure.database.base_model import BaseModel
from icecube_api.infrastructure.database.session import get_engine, init_engine

import icecube_api.infrastructure.database.models  # noqa: F401

logger = logging.getLogger("icecube.main")


def create_app(*, database_url: str | None = None) -> Flask:
    app = Flask(__name__)

    CORS(
        app,
        resources={rf"{settings.app_prefix}/*": {"origins": settings.cors_origins}},
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    )

    configure_app(app)

    init_engine(database_url)

    register_routes(app, app_prefix=settings.app_prefix)
    register_error_handlers(app)

    @app.cli.command("init-db")
    def init_db_command():
        """Cria as tabelas a partir dos models."""
        BaseModel.metadata.create_all(get_engine())
        click.echo("Database schema created.")

    logger.info("Icecube API ready (prefix=%r, environment=%s)", settings.app_prefix, settings.environment)
    return app


app = create_app()

if __name__ == "__main__":
    # só para desenvolvimento; em produção use gunicorn icecube_api.main:app
    app.run(host="0.0.0.0", port=5000, debug=settings.debug)
