import threading

import pytest

from users_api.adapters.repository import InMemoryUserRepository, create_repository
from users_api.domain.errors import InvalidDatabaseTypeError, UserNotFoundError
from users_api.domain.user import User
from users_api.services.data.unit_of_work import UserUoW


@pytest.fixture
def repository():
    return InMemoryUserRepository()


def test_create_then_get(repository):
    alice = User(id="alice", name="Alice", age=30)
    repository.create(alice)
    assert repository.get("alice") == alice


def test_get_missing(repository):
    with pytest.raises(UserNotFoundError):
        repository.get("nobody")


def test_create_overwrites(repository):
    repository.create(User(id="alice", name="Alice", age=30))
    repository.create(User(id="alice", name="Other", age=1))
    assert repository.get("alice").name == "Other"


def test_update_keeps_key(repository):
    repository.create(User(id="alice", name="Alice", age=30))
    repository.update("alice", User(id="alice", name="Alice Smith", age=31))
    assert repository.get("alice") == User(id="alice", name="Alice Smith", age=31)
    assert len(repository.list()) == 1


def test_delete(repository):
    repository.create(User(id="alice", name="Alice", age=30))
    repository.delete("alice")
    with pytest.raises(UserNotFoundError):
        repository.get("alice")


def test_delete_missing_is_silent(repository):
    repository.delete("nobody")
    assert repository.list() == []


def test_list_reflects_live_records(repository):
    for user_id in ("alice", "bob", "carol"):
        repository.create(User(id=user_id, name=user_id.title(), age=20))
    repository.delete("bob")
    assert {user.id for user in repository.list()} == {"alice", "carol"}


def test_records_are_copied(repository):
    alice = User(id="alice", name="Alice", age=30)
    repository.create(alice)
    alice.name = "Mallory"
    fetched = repository.get("alice")
    fetched.age = 99
    assert repository.get("alice") == User(id="alice", name="Alice", age=30)


def test_create_repository_mock():
    assert isinstance(create_repository("mock"), InMemoryUserRepository)


def test_create_repository_unknown():
    with pytest.raises(InvalidDatabaseTypeError, match="invalid database type: postgres"):
        create_repository("postgres")


def test_uow_holds_lock_for_block(repository):
    uow = UserUoW(repository)
    acquired = []

    def other_thread():
        got = repository.lock.acquire(blocking=False)
        if got:
            repository.lock.release()
        acquired.append(got)

    with uow:
        worker = threading.Thread(target=other_thread)
        worker.start()
        worker.join()
    assert acquired == [False]

    worker = threading.Thread(target=other_thread)
    worker.start()
    worker.join()
    assert acquired == [False, True]
