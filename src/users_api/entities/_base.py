from sqlmodel import Field, SQLModel


class EntityTable(SQLModel, table=False):
    """Base table with a storage-assigned integer primary key (serial)."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier assigned by the database",
    )
