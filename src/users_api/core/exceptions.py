"""Exceptions raised by the users service."""


class UsersApiError(Exception):
    """Base exception for the users service."""


class UserNotFoundError(UsersApiError):
    """Raised when no user row matches the requested id.

    Malformed ids are reported with this error too, so callers cannot tell
    an unparseable id from an absent one.
    """

    def __init__(self, user_id: object):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class DatabaseUnavailableError(UsersApiError):
    """Raised when the database cannot be reached during bootstrap."""
