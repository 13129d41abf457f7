# icecube_api/api/routes/root_routes.py

from flask import Blueprint, Response

from icecube_api import API_VERSION_INFO

bp_root = Blueprint("root", __name__)


@bp_root.get("/")
def get_information():
    return Response(API_VERSION_INFO, status=200, mimetype="text/plain")
