from __future__ import annotations

from typing import Optional

import pytest

from src.user_api.user_api.container import Container
from src.user_api.user_api.core.exceptions import RowNotFound
from src.user_api.user_api.main import create_app
from src.user_api.user_api.users.credentials import CredentialPreparer
from src.user_api.user_api.users.model import UserPublicView
from src.user_api.user_api.users.service import UserService

TEST_HASH_SECRET = "test-hash-secret"


class InMemoryUsers:
    """Dict-backed stand-in for the MySQL repository, same not-found contract."""

    def __init__(self):
        self.rows: dict[int, UserPublicView] = {}
        self.password_hashes: dict[int, str] = {}
        self.calls: list[str] = []
        self._next_id = 1

    def _require(self, user_id: int) -> UserPublicView:
        user = self.rows.get(user_id)
        if user is None:
            raise RowNotFound()
        return user

    def list_all(self):
        self.calls.append("list_all")
        return list(self.rows.values())

    def get_by_id(self, user_id: int) -> UserPublicView:
        self.calls.append("get_by_id")
        return self._require(user_id)

    def create_user(self, *, username: str, password_hash: str) -> UserPublicView:
        self.calls.append("create_user")
        user = UserPublicView(id=self._next_id, username=username)
        self.rows[user.id] = user
        self.password_hashes[user.id] = password_hash
        self._next_id += 1
        return user

    def update_username(self, user_id: int, *, username: str) -> UserPublicView:
        self.calls.append("update_username")
        updated = UserPublicView(id=self._require(user_id).id, username=username)
        self.rows[user_id] = updated
        return updated

    def delete_by_id(self, user_id: int) -> UserPublicView:
        self.calls.append("delete_by_id")
        deleted = self.rows.pop(self._require(user_id).id)
        self.password_hashes.pop(user_id, None)
        return deleted

    def password_hash_of(self, user_id: int) -> Optional[str]:
        return self.password_hashes.get(user_id)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def credentials():
    preparer = CredentialPreparer(TEST_HASH_SECRET, workers=1)
    yield preparer
    preparer.close()


@pytest.fixture
def user_service(users_repo, credentials) -> UserService:
    return UserService(users_repo, credentials)


@pytest.fixture
def container(users_repo, credentials, user_service) -> Container:
    return Container(pool=None, users_repo=users_repo, credentials=credentials, user_service=user_service)


@pytest.fixture
def app(container):
    app = create_app(container=container, settings_module="config.testing")
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
