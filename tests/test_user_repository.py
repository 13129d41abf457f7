from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from icecube_api.core.exceptions import UserUpdateError
from icecube_api.infrastructure.database.models.user_model import UserModel
from icecube_api.infrastructure.database.session import db_session
from icecube_api.repositories.user_repository import UserRepository
from icecube_api.services.user_service import UserService


def _user(**overrides) -> UserModel:
    fields = {
        "username": "alice91",
        "first_name": "Alice",
        "last_name": "Odobert",
        "email": "alice@example.com",
        "password": "plain-secret",
    }
    fields.update(overrides)
    return UserModel(**fields)


def _seed(**overrides) -> int:
    with db_session() as session:
        return UserRepository(session).add(_user(**overrides)).id


def test_add_assigns_id_and_storage_defaults(engine) -> None:
    with db_session() as session:
        created = UserRepository(session).add(_user())

        assert created.id is not None
        assert created.is_active is True
        assert created.created_at is not None
        assert created.updated_at is not None


def test_list_all_empty_and_ordered(engine) -> None:
    with db_session() as session:
        assert UserRepository(session).list_all() == []

    first = _seed(username="first")
    second = _seed(username="second")

    with db_session() as session:
        rows = UserRepository(session).list_all()

    assert [r.id for r in rows] == [first, second]


def test_update_by_id_reports_affected_rows(engine) -> None:
    user_id = _seed()

    with db_session() as session:
        repo = UserRepository(session)
        assert repo.update_by_id(user_id, {"username": "renamed"}) == 1
        assert repo.update_by_id(user_id + 100, {"username": "ghost"}) == 0

    with db_session() as session:
        assert UserRepository(session).get_by_id(user_id).username == "renamed"


def test_get_by_id_sees_bulk_update_in_same_session(engine) -> None:
    with db_session() as session:
        repo = UserRepository(session)
        created = repo.add(_user())
        repo.update_by_id(created.id, {"first_name": "Ally"})

        assert repo.get_by_id(created.id).first_name == "Ally"


def test_delete_by_id_reports_affected_rows(engine) -> None:
    user_id = _seed()

    with db_session() as session:
        repo = UserRepository(session)
        assert repo.delete_by_id(user_id) == 1
        assert repo.delete_by_id(user_id) == 0
        assert repo.get_by_id(user_id) is None


def test_missing_required_column_propagates_integrity_error(engine) -> None:
    with pytest.raises(IntegrityError):
        with db_session() as session:
            UserRepository(session).add(UserModel(username="only-name"))

    with db_session() as session:
        assert UserRepository(session).list_all() == []


def test_service_update_refreshes_updated_at(engine) -> None:
    user_id = _seed()

    with db_session() as session:
        before = UserRepository(session).get_by_id(user_id).updated_at

    with db_session() as session:
        updated = UserService(UserRepository(session)).update_user(user_id, username="alice92")

    assert updated.username == "alice92"
    assert updated.email == "alice@example.com"
    assert updated.updated_at > before


def test_service_update_missing_id_leaves_storage_unchanged(engine) -> None:
    user_id = _seed()

    with pytest.raises(UserUpdateError):
        with db_session() as session:
            UserService(UserRepository(session)).update_user(999, username="x")

    with db_session() as session:
        rows = UserRepository(session).list_all()

    assert [(r.id, r.username) for r in rows] == [(user_id, "alice91")]


@pytest.mark.parametrize("user_id", [2**63, -(2**63) - 1])
def test_ids_outside_bigint_range_behave_as_missing(engine, user_id: int) -> None:
    _seed()

    with db_session() as session:
        repo = UserRepository(session)
        assert repo.get_by_id(user_id) is None
        assert repo.update_by_id(user_id, {"username": "x"}) == 0
        assert repo.delete_by_id(user_id) == 0
        assert len(repo.list_all()) == 1


def test_bigint_bounds_are_queried_normally(engine) -> None:
    with db_session() as session:
        repo = UserRepository(session)
        assert repo.get_by_id(2**63 - 1) is None
        assert repo.delete_by_id(-(2**63)) == 0
