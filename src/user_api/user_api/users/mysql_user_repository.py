from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.exceptions import RowNotFound
from ..database.connection import DatabasePool
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import UserPublicView
from .repository import UserRepository

_SELECT_ONE = "SELECT id, username FROM users WHERE id=%s"


def _to_view(row: Optional[Dict[str, Any]]) -> UserPublicView:
    if not row:
        raise RowNotFound()
    return UserPublicView(id=int(row["id"]), username=row["username"])


class MySQLUserRepository(UserRepository):
    """MySQL-backed users.

    MySQL has no ``RETURNING``, so each write reads the affected row back on the
    same connection inside the same transaction.
    """

    def __init__(self, pool: DatabasePool):
        self._pool = pool

    def list_all(self) -> Sequence[UserPublicView]:
        with db_cursor(self._pool) as (_, cur):
            cur.execute("SELECT id, username FROM users")
            return [_to_view(r) for r in fetchall(cur)]

    def get_by_id(self, user_id: int) -> UserPublicView:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(_SELECT_ONE, (user_id,))
            return _to_view(fetchone(cur))

    def create_user(self, *, username: str, password_hash: str) -> UserPublicView:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(
                "INSERT INTO users (username, password) VALUES (%s, %s)",
                (username, password_hash),
            )
            cur.execute(_SELECT_ONE, (int(cur.lastrowid),))
            return _to_view(fetchone(cur))

    def update_username(self, user_id: int, *, username: str) -> UserPublicView:
        with db_cursor(self._pool) as (_, cur):
            cur.execute("UPDATE users SET username=%s WHERE id=%s", (username, user_id))
            # rowcount is 0 when the username did not change, so look the row up instead.
            cur.execute(_SELECT_ONE, (user_id,))
            return _to_view(fetchone(cur))

    def delete_by_id(self, user_id: int) -> UserPublicView:
        with db_cursor(self._pool) as (_, cur):
            cur.execute(_SELECT_ONE + " FOR UPDATE", (user_id,))
            deleted = _to_view(fetchone(cur))
            cur.execute("DELETE FROM users WHERE id=%s", (user_id,))
            return deleted
