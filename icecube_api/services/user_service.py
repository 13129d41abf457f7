# icecube_api/services/user_service.py

import logging
from typing import Any

from icecube_api.core.exceptions import AppError, UserUpdateError
from icecube_api.core.interfaces.user_store import UserStore
from icecube_api.infrastructure.database.models.user_model import UserModel

logger = logging.getLogger("icecube.users")

# id e timestamps pertencem ao banco
_IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


class UserService:
    def __init__(self, user_repository: UserStore) -> None:
        self._user_repository = user_repository

    def list_users(self) -> list[UserModel]:
        return self._user_repository.list_all()

    def get_user(self, user_id: int) -> UserModel | None:
        return self._user_repository.get_by_id(user_id)

    def create_user(self, **fields: Any) -> UserModel:
        values = {k: v for k, v in fields.items() if k not in _IMMUTABLE_FIELDS}
        created = self._user_repository.add(UserModel(**values))
        logger.info("User %s created", created.id)
        return created

    def update_user(self, user_id: int, **changes: Any) -> UserModel | None:
        """
        Aplica as alterações e relê o registro do banco.

        Levanta UserUpdateError se nenhuma linha foi afetada. Pode retornar None
        se o registro sumir entre a escrita e a releitura.
        """
        values = {k: v for k, v in changes.items() if k not in _IMMUTABLE_FIELDS}
        if not values:
            raise AppError("No user fields to update.")

        affected = self._user_repository.update_by_id(user_id, values)
        if affected == 0:
            logger.warning("Update on user %s affected no rows", user_id)
            raise UserUpdateError()

        logger.info("User %s updated (fields=%s)", user_id, sorted(values))
        return self._user_repository.get_by_id(user_id)

    def delete_user(self, user_id: int) -> None:
        deleted = self._user_repository.delete_by_id(user_id)
        logger.info("Delete on user %s removed %s row(s)", user_id, deleted)
