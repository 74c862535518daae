from __future__ import annotations

import logging
from typing import Sequence

from .credentials import CredentialPreparer
from .model import UserPublicView
from .repository import UserRepository
from .schemas import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)


class UserService:
    """Use case: CRUD over users.

    Errors from the repository (``StoreError`` and ``RowNotFound``) propagate
    unchanged; the controller decides how they are rendered.
    """

    def __init__(self, users: UserRepository, credentials: CredentialPreparer):
        self._users = users
        self._credentials = credentials

    def list_users(self) -> Sequence[UserPublicView]:
        return self._users.list_all()

    def get_user(self, user_id: int) -> UserPublicView:
        return self._users.get_by_id(user_id)

    def create_user(self, req: CreateUserRequest) -> UserPublicView:
        password_hash = self._credentials.prepare(req.password)
        user = self._users.create_user(username=req.username, password_hash=password_hash)
        logger.info("Created user id=%s", user.id)
        return user

    def update_user(self, user_id: int, req: UpdateUserRequest) -> UserPublicView:
        return self._users.update_username(user_id, username=req.username)

    def delete_user(self, user_id: int) -> UserPublicView:
        user = self._users.delete_by_id(user_id)
        logger.info("Deleted user id=%s", user.id)
        return user
