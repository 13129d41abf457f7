# icecube_api/repositories/user_repository.py

from sqlalchemy.orm import Session

from icecube_api.core.base_repository import BaseRepository
from icecube_api.infrastructure.database.models.user_model import UserModel


class UserRepository(BaseRepository[UserModel]):
    model = UserModel

    def __init__(self, session: Session) -> None:
        super().__init__(session)
