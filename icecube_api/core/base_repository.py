# icecube_api/core/base_repository.py
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

TModel = TypeVar("TModel")

# faixa de BIGINT; fora dela o driver estoura antes de chegar ao banco
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


def id_in_range(entity_id: int) -> bool:
    return ID_MIN <= int(entity_id) <= ID_MAX


class BaseRepository(Generic[TModel]):
    """CRUD por chave primária `id` para um único model."""

    model: ClassVar[type]

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[TModel]:
        stmt = select(self.model).order_by(self.model.id.asc())
        return list(self._session.execute(stmt).scalars().all())

    def get_by_id(self, entity_id: int) -> TModel | None:
        if not id_in_range(entity_id):
            return None

        # populate_existing: depois de um update em massa o identity map pode estar velho
        stmt = (
            select(self.model)
            .where(self.model.id == int(entity_id))
            .execution_options(populate_existing=True)
        )
        return self._session.execute(stmt).scalar_one_or_none()

    def add(self, model: TModel) -> TModel:
        self._session.add(model)
        self._session.flush()
        return model

    def update_by_id(self, entity_id: int, values: dict[str, Any]) -> int:
        if not id_in_range(entity_id):
            return 0

        stmt = (
            update(self.model)
            .where(self.model.id == int(entity_id))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = self._session.execute(stmt)
        return result.rowcount or 0

    def delete_by_id(self, entity_id: int) -> int:
        if not id_in_range(entity_id):
            return 0

        stmt = (
            delete(self.model)
            .where(self.model.id == int(entity_id))
            .execution_options(synchronize_session=False)
        )
        result = self._session.execute(stmt)
        return result.rowcount or 0
