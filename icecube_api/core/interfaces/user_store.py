# icecube_api/core/interfaces/user_store.py
from __future__ import annotations

from typing import Any, Protocol

from icecube_api.infrastructure.database.models.user_model import UserModel


class UserStore(Protocol):
    """Operações de armazenamento que o UserService precisa."""

    def list_all(self) -> list[UserModel]: ...
    def get_by_id(self, entity_id: int) -> UserModel | None: ...
    def add(self, model: UserModel) -> UserModel: ...
    def update_by_id(self, entity_id: int, values: dict[str, Any]) -> int: ...
    def delete_by_id(self, entity_id: int) -> int: ...
