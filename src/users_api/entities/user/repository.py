"""User repository: one SQL statement per operation."""

from sqlalchemy import delete, update
from sqlmodel import Session, select

from .entity import User, UserInput
from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(UserTable.id)
        return [User.from_row(row) for row in self._session.exec(statement).all()]

    def get(self, user_id: int) -> User | None:
        statement = select(UserTable).where(UserTable.id == user_id)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.from_row(row)

    def exists(self, user_id: int) -> bool:
        return self.get(user_id) is not None

    def create(self, payload: UserInput) -> User:
        row = UserTable.from_input(payload)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.from_row(row)

    def update(self, user_id: int, payload: UserInput) -> User | None:
        """Overwrite name and email, then read the row back.

        The update runs without checking for the row first; ``None`` means
        no row has this id.
        """
        statement = (
            update(UserTable)
            .where(UserTable.id == user_id)
            .values(name=payload.name, email=payload.email)
        )
        self._session.exec(statement)
        return self.get(user_id)

    def delete(self, user_id: int) -> bool:
        statement = delete(UserTable).where(UserTable.id == user_id)
        result = self._session.exec(statement)
        return result.rowcount > 0
