"""Entities organized by business concept.

Each entity package holds:
- entity.py: JSON-facing models
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .user import User, UserInput, UserRepository, UserTable

__all__ = ["User", "UserInput", "UserRepository", "UserTable"]
