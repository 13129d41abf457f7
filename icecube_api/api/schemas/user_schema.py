# icecube_api/api/schemas/user_schema.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    # JSON em camelCase (firstName, isActive...), atributos em snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserFields(_CamelModel):
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    is_active: bool | None = None


class CreateUserRequest(UserFields):
    pass


class UpdateUserRequest(UserFields):
    pass


class UserResponse(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    first_name: str
    last_name: str
    email: str
    password: str
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
