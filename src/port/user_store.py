from typing import Any, Mapping, Protocol

from domain.model.result import Result
from domain.model.user import UserPage


class UserStore(Protocol):
    """Protocol defining the user resource lifecycle operations.

    Every operation returns a ``Result``; values crossing this boundary are
    safe views (plain dicts without ``password``).
    """
    def create_user(self, user_data: Mapping[str, Any]) -> Result[dict]:
        """Validate, check uniqueness, store. Return the new user's safe view."""
        ...

    def get_user_by_id(self, user_id: str) -> Result[dict]:
        """Return the safe view of a live user, or NotFoundError."""
        ...

    def get_user_by_email(self, email: str) -> Result[dict]:
        """Return the safe view of the user with this exact email, or NotFoundError."""
        ...

    def update_user(self, user_id: str, updates: Mapping[str, Any]) -> Result[dict]:
        """Merge permitted fields into a live user. id, password and role are ignored."""
        ...

    def delete_user(self, user_id: str) -> Result[bool]:
        """Hard-delete a live user. Return True, or NotFoundError."""
        ...

    def get_all_users(self, page: int = 1, limit: int = 10) -> Result[UserPage]:
        """Return one page of users in insertion order plus the total count."""
        ...

    def count(self) -> int:
        """Number of live users."""
        ...
