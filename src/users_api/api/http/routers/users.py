"""Users API router with CRUD operations."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from src.users_api.api.http.deps import get_db_session, get_user_id
from src.users_api.core.exceptions import UserNotFoundError
from src.users_api.entities.user import User, UserInput, UserRepository

router = APIRouter(prefix="/users", tags=["users"])

DELETED_MESSAGE = "User deleted"


@router.get("", response_model=list[User])
def list_users(
    session: Session = Depends(get_db_session),
) -> list[User]:
    """List all users."""
    return UserRepository(session).list_all()


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: int = Depends(get_user_id),
    session: Session = Depends(get_db_session),
) -> User:
    """Get a user by ID."""
    user = UserRepository(session).get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


@router.post("", response_model=User)
def create_user(
    payload: UserInput,
    session: Session = Depends(get_db_session),
) -> User:
    """Create a new user; the database assigns the id."""
    created_user = UserRepository(session).create(payload)
    session.commit()
    return created_user


@router.put("/{user_id}", response_model=User)
def update_user(
    payload: UserInput,
    user_id: int = Depends(get_user_id),
    session: Session = Depends(get_db_session),
) -> User:
    """Update a user's name and email."""
    updated_user = UserRepository(session).update(user_id, payload)
    if updated_user is None:
        raise UserNotFoundError(user_id)
    session.commit()
    return updated_user


@router.delete("/{user_id}", response_model=str)
def delete_user(
    user_id: int = Depends(get_user_id),
    session: Session = Depends(get_db_session),
) -> str:
    """Delete a user."""
    repository = UserRepository(session)
    if not repository.exists(user_id):
        raise UserNotFoundError(user_id)
    repository.delete(user_id)
    session.commit()
    return DELETED_MESSAGE
