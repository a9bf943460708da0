"""User JSON models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .table import UserTable


class UserInput(BaseModel):
    """Request body for creating or updating a user.

    Fields other than ``name`` and ``email`` (an ``id`` included) are ignored.
    Missing fields decode to empty strings; values are not validated beyond
    being strings.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="", description="User's name")
    email: str = Field(default="", description="User's email address")


class User(UserInput):
    """User as returned by the API."""

    id: int = Field(description="Identifier assigned by the database")

    @classmethod
    def from_row(cls, row: UserTable) -> User:
        """Build the response model from a row; NULL columns decode to empty strings."""
        return cls(id=row.id, name=row.name or "", email=row.email or "")
