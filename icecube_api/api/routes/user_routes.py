# icecube_api/api/routes/user_routes.py

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from icecube_api.api.schemas.user_schema import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)
from icecube_api.core.exceptions import UserUpdateError
from icecube_api.infrastructure.database.models.user_model import UserModel
from icecube_api.infrastructure.database.session import db_session
from icecube_api.repositories.user_repository import UserRepository
from icecube_api.services.user_service import UserService


bp_users = Blueprint("users", __name__, url_prefix="/users")

USER_NOT_FOUND = "User not found"


# -------------------------
# Helpers
# -------------------------

def _build_service(session) -> UserService:
    return UserService(UserRepository(session))


def _to_json(user: UserModel) -> dict:
    return UserResponse.model_validate(user).model_dump(mode="json", by_alias=True)


def _not_found() -> Response:
    return Response(USER_NOT_FOUND, status=404, mimetype="text/plain")


# -------------------------
# Rotas
# -------------------------

@bp_users.get("")
def list_users():
    with db_session() as session:
        users = _build_service(session).list_users()
        body = [_to_json(u) for u in users]

    return jsonify(body), 200


@bp_users.get("/<int(signed=True):user_id>")
def get_user(user_id: int):
    with db_session() as session:
        user = _build_service(session).get_user(user_id)
        if user is None:
            return _not_found()
        body = _to_json(user)

    return jsonify(body), 200


@bp_users.post("")
def create_user():
    payload = CreateUserRequest.model_validate(request.get_json(force=True))

    with db_session() as session:
        created = _build_service(session).create_user(**payload.model_dump(exclude_unset=True))
        body = _to_json(created)

    return jsonify(body), 201


@bp_users.put("/<int(signed=True):user_id>")
def update_user(user_id: int):
    payload = UpdateUserRequest.model_validate(request.get_json(force=True))

    # escrita e releitura na mesma transação
    with db_session() as session:
        try:
            updated = _build_service(session).update_user(
                user_id, **payload.model_dump(exclude_unset=True)
            )
        except UserUpdateError:
            return _not_found()

        if updated is None:
            return _not_found()
        body = _to_json(updated)

    return jsonify(body), 200


@bp_users.delete("/<int(signed=True):user_id>")
def delete_user(user_id: int):
    with db_session() as session:
        _build_service(session).delete_user(user_id)

    return ("", 204)
