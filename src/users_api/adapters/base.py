import abc
import contextlib
from typing import ContextManager, List

from users_api.domain.user import User


class IRepository(abc.ABC):
    """Storage contract for user records keyed by ``User.id``.

    Implementations stay permissive: ``create`` and ``update`` overwrite,
    ``delete`` ignores missing keys. Only ``get`` reports a missing record,
    by raising ``UserNotFoundError``. Existence rules belong to the caller.
    """

    @property
    def lock(self) -> ContextManager:
        """Held by the unit of work for the span of one request."""
        return contextlib.nullcontext()

    @abc.abstractmethod
    def list(self) -> List[User]:
        raise NotImplementedError

    @abc.abstractmethod
    def create(self, user: User) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def get(self, user_id: str) -> User:
        raise NotImplementedError

    @abc.abstractmethod
    def update(self, user_id: str, user: User) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def delete(self, user_id: str) -> None:
        raise NotImplementedError
