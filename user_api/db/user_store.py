from __future__ import annotations

from threading import Lock

from user_api.models.schemas import User, UserCreate, UserUpdate


class UserStore:
    """Process-local user collection (resets on restart).

    Ids come from a counter that only moves forward, so ids of deleted users are
    never handed out again. All operations share one lock, which keeps the
    increment-and-append of ``create`` and the locate-and-merge of ``update``
    atomic with respect to each other.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._users: list[User] = []
        self._last_id: int = 0

    def list(self) -> list[User]:
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get_by_id(self, user_id: int) -> User | None:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            return self._users[index].model_copy()

    def create(self, data: UserCreate) -> User:
        with self._lock:
            self._last_id += 1
            user = User(id=self._last_id, name=data.name, email=data.email)
            self._users.append(user)
            return user.model_copy()

    def update(self, user_id: int, data: UserUpdate) -> User | None:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            current = self._users[index]
            # `id` is not part of UserUpdate, so it cannot be overwritten here.
            updated = current.model_copy(update=data.changes())
            self._users[index] = updated
            return updated.model_copy()

    def delete(self, user_id: int) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._users[index]
            return True

    def reset(self) -> None:
        """Drop all users and restart ids at 1 (used by tests)."""

        with self._lock:
            self._users = []
            self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _index_of(self, user_id: int) -> int | None:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None
