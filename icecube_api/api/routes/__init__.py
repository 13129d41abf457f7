# icecube_api/api/routes/__init__.py

from flask import Flask

from icecube_api.api.routes.health_routes import bp_health
from icecube_api.api.routes.root_routes import bp_root
from icecube_api.api.routes.user_routes import bp_users


def register_routes(app: Flask, *, app_prefix: str = "") -> None:
    app.register_blueprint(bp_root, url_prefix=app_prefix or None)
    app.register_blueprint(bp_health, url_prefix=f"{app_prefix}/health")
    app.register_blueprint(bp_users, url_prefix=f"{app_prefix}/users")
