"""User database table model."""

import sqlalchemy as sa
from sqlmodel import Field

from src.users_api.entities._base import EntityTable

from .entity import UserInput


class UserTable(EntityTable, table=True):
    """Database persistence model for users: ``users(id serial, name text, email text)``."""

    __tablename__ = "users"

    # Columns are nullable; rows written through the API always set both
    name: str | None = Field(default=None, sa_type=sa.Text)
    email: str | None = Field(default=None, sa_type=sa.Text)

    @classmethod
    def from_input(cls, payload: UserInput) -> "UserTable":
        return cls(name=payload.name, email=payload.email)
