"""Database initialization script."""

from src.users_api.core.services import DbManageService, DbSessionService
from src.users_api.runtime.config.config_data import DatabaseConfig


def init_db(db_config: DatabaseConfig | None = None) -> None:
    """Create the users table if it does not exist yet."""
    database_service = DbSessionService(db_config)
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
