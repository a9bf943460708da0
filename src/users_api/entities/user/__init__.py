"""User entity module.

- User / UserInput: JSON response and request models
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import User, UserInput
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserInput", "UserTable", "UserRepository"]
