# icecube_api/api/routes/health_routes.py

from flask import Blueprint, jsonify
from sqlalchemy import text

from icecube_api import __version__
from icecube_api.config.settings import settings
from icecube_api.infrastructure.database.session import db_session

bp_health = Blueprint("health", __name__, url_prefix="/health")


@bp_health.get("")
def health():
    return jsonify(
        {"status": "ok", "version": __version__, "environment": settings.environment}
    ), 200


@bp_health.get("/db")
def health_db():
    with db_session() as session:
        session.execute(text("select 1"))
        dialect = session.get_bind().dialect.name
    return jsonify({"db": "ok", "dialect": dialect}), 200
