"""FastAPI dependency implementations."""

import re
from collections.abc import Iterator

from fastapi import Request
from sqlmodel import Session

from src.users_api.api.http.app_data import ApplicationDependencies
from src.users_api.core.exceptions import UserNotFoundError
from src.users_api.core.services import DbSessionService

_USER_ID_PATTERN = re.compile(r"-?\d+")
# ids are Postgres serial (int4) values
_MAX_USER_ID = 2**31 - 1


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a session for the duration of one request."""
    with get_database_service(request).session_scope() as session:
        yield session


def get_user_id(user_id: str) -> int:
    """Parse the ``{user_id}`` path segment.

    Non-numeric and out-of-range ids cannot match a row, so they are
    reported as not found.
    """
    if not _USER_ID_PATTERN.fullmatch(user_id):
        raise UserNotFoundError(user_id)
    parsed = int(user_id)
    if not -_MAX_USER_ID - 1 <= parsed <= _MAX_USER_ID:
        raise UserNotFoundError(user_id)
    return parsed
