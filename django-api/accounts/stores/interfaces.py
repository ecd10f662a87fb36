"""Store interfaces for users."""

from abc import ABC, abstractmethod

from accounts.domain import User, UserId


class UserStore(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    def get_user(self, user_id: UserId) -> User | None:
        """Return a user by ID, or None if not found."""
        ...

    @abstractmethod
    def save_user(self, user: User) -> None:
        """Insert or replace a user."""
        ...
