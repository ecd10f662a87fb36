"""In-memory UserStore, used by tests and the memory backend."""

import threading

from accounts.domain import User, UserId
from accounts.stores.interfaces import UserStore


class InMemoryUserStore(UserStore):
    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._lock = threading.Lock()

    def get_user(self, user_id: UserId) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def save_user(self, user: User) -> None:
        with self._lock:
            self._users[user.id] = user
