from __future__ import annotations

from typing import Protocol, Sequence

from .model import UserPublicView


class UserRepository(Protocol):
    """Repository interface for users.

    Every single-row operation returns the row's projection after the statement
    ran, and raises ``RowNotFound`` when no row matched the id.
    """

    def list_all(self) -> Sequence[UserPublicView]:
        raise NotImplementedError

    def get_by_id(self, user_id: int) -> UserPublicView:
        raise NotImplementedError

    def create_user(self, *, username: str, password_hash: str) -> UserPublicView:
        raise NotImplementedError

    def update_username(self, user_id: int, *, username: str) -> UserPublicView:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> UserPublicView:
        raise NotImplementedError
