from __future__ import annotations

import abc
from typing import Any, ContextManager, Optional

from users_api.adapters.base import IRepository


class IUoW(abc.ABC):
    users: IRepository

    def __enter__(self) -> "IUoW":
        return self

    def __exit__(self, *args: Any) -> None:
        self.rollback()

    @abc.abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError


class UserUoW(IUoW):
    """Serializes one request's storage calls on the repository lock."""

    def __init__(self, repository: IRepository) -> None:
        self.users = repository
        self._held: Optional[ContextManager] = None

    def __enter__(self) -> "UserUoW":
        self._held = self.users.lock
        self._held.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        try:
            super().__exit__(*args)
        finally:
            held, self._held = self._held, None
            held.__exit__(*args)

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        pass
