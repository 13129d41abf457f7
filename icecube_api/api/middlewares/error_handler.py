# icecube_api/api/middlewares/error_handler.py
import logging

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from icecube_api.config.settings import settings
from icecube_api.core.exceptions import AppError

logger = logging.getLogger("icecube.errors")

INTERNAL_ERROR = "Internal server error"


def error_body(message: str, status: int, **extra) -> dict:
    # formato único de erro JSON da API: {"error", "status", ...}
    return {"error": message, "status": status, **extra}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        return jsonify(error_body(str(err), err.status_code)), err.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        fields = [
            {"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"]}
            for e in err.errors(include_url=False, include_context=False, include_input=False)
        ]
        return jsonify(error_body("Invalid request body", 400, fields=fields)), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        code = err.code or 500
        return jsonify(error_body(err.description or err.name, code)), code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("Unhandled %s while processing request", type(err).__name__)

        message = str(err) if settings.debug else INTERNAL_ERROR
        return jsonify(error_body(message, 500)), 500
