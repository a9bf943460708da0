"""Schema bootstrap for the users database."""

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

from src.users_api.core.exceptions import DatabaseUnavailableError
from src.users_api.entities.user import UserTable


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def check_connection(self) -> None:
        """Open a connection and run ``SELECT 1``.

        Raises:
            DatabaseUnavailableError: If the database cannot be reached.
        """
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise DatabaseUnavailableError(
                f"Cannot connect to database: {e}"
            ) from e

    def create_all(self) -> None:
        """Verify connectivity, then create missing tables.

        Safe to call on every start: existing tables and rows are left as they are.
        """
        self.check_connection()
        SQLModel.metadata.create_all(
            self._engine, tables=[UserTable.__table__], checkfirst=True
        )
        logger.info("Database initialized with tables.")
