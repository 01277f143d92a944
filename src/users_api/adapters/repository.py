from __future__ import annotations

import copy
import threading
from typing import Dict, List

from users_api.domain.errors import InvalidDatabaseTypeError, UserNotFoundError
from users_api.domain.user import User

from .base import IRepository


class InMemoryUserRepository(IRepository):
    """The ``mock`` backend: a dict from user ID to record.

    Records are copied on the way in and out, so the dict stays the only
    holder of stored state.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def list(self) -> List[User]:
        with self._lock:
            return [copy.copy(user) for user in self._users.values()]

    def create(self, user: User) -> None:
        with self._lock:
            self._users[user.id] = copy.copy(user)

    def get(self, user_id: str) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return copy.copy(user)

    def update(self, user_id: str, user: User) -> None:
        with self._lock:
            self._users[user_id] = copy.copy(user)

    def delete(self, user_id: str) -> None:
        with self._lock:
            self._users.pop(user_id, None)


REPOSITORIES = {
    "mock": InMemoryUserRepository,
}


def create_repository(database_type: str) -> IRepository:
    try:
        factory = REPOSITORIES[database_type]
    except KeyError:
        raise InvalidDatabaseTypeError(database_type) from None
    return factory()
