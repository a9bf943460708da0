"""Data layer tests: user repository and schema bootstrap.

Repository tests run against in-memory SQLite so every statement is real SQL.
"""

import pytest
from sqlalchemy import inspect
from sqlmodel import Session, select

from src.users_api.core.services import DbManageService
from src.users_api.entities.user import User, UserInput, UserRepository, UserTable


class TestUserRepository:
    @pytest.fixture
    def repository(self, session: Session) -> UserRepository:
        return UserRepository(session)

    def test_list_all_empty(self, repository: UserRepository):
        assert repository.list_all() == []

    def test_create_assigns_id(self, repository: UserRepository, session: Session):
        user = repository.create(UserInput(name="Alice", email="a@x.com"))
        session.commit()

        assert user == User(id=1, name="Alice", email="a@x.com")
        assert session.exec(select(UserTable)).one().name == "Alice"

    def test_create_then_get(self, repository: UserRepository):
        created = repository.create(UserInput(name="Ada", email="ada@example.com"))

        fetched = repository.get(created.id)

        assert fetched == created
        assert isinstance(fetched, User)
        assert not isinstance(fetched, UserTable)

    def test_get_missing_returns_none(self, repository: UserRepository):
        assert repository.get(999) is None

    def test_list_all_ordered_by_id(self, repository: UserRepository):
        names = ["carol", "alice", "bob"]
        for name in names:
            repository.create(UserInput(name=name, email=f"{name}@example.com"))

        users = repository.list_all()

        assert [user.name for user in users] == names
        assert [user.id for user in users] == [1, 2, 3]

    def test_update_overwrites_fields(self, repository: UserRepository):
        created = repository.create(UserInput(name="Alice", email="a@x.com"))

        updated = repository.update(created.id, UserInput(name="Bob", email="b@x.com"))

        assert updated == User(id=created.id, name="Bob", email="b@x.com")
        assert repository.get(created.id) == updated

    def test_update_missing_returns_none(self, repository: UserRepository):
        assert repository.update(12, UserInput(name="x", email="y")) is None
        assert repository.list_all() == []

    def test_exists(self, repository: UserRepository):
        created = repository.create(UserInput(name="Alice", email="a@x.com"))

        assert repository.exists(created.id)
        assert not repository.exists(created.id + 1)

    def test_delete(self, repository: UserRepository):
        created = repository.create(UserInput(name="Alice", email="a@x.com"))

        assert repository.delete(created.id) is True
        assert repository.get(created.id) is None
        assert repository.delete(created.id) is False


class TestSchemaBootstrap:
    def test_creates_users_table(self, engine):
        UserTable.__table__.drop(engine)

        DbManageService(engine).create_all()

        columns = {column["name"] for column in inspect(engine).get_columns("users")}
        assert columns == {"id", "name", "email"}

    def test_repeated_bootstrap_keeps_rows(self, engine):
        manager = DbManageService(engine)
        manager.create_all()
        with Session(engine) as session:
            UserRepository(session).create(UserInput(name="Alice", email="a@x.com"))
            session.commit()

        manager.create_all()
        manager.create_all()

        with Session(engine) as session:
            assert UserRepository(session).list_all() == [
                User(id=1, name="Alice", email="a@x.com")
            ]
