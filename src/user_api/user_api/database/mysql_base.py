from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StoreError


@contextmanager
def db_cursor(pool, *, dictionary: bool = True):
    """Check a connection out of ``pool`` and run one unit of work on it.

    Commits on success, rolls back on any error. Any other error (driver errors,
    parameter conversion errors) is re-raised as ``StoreError`` with the original
    chained; ``StoreError`` raised inside the block (e.g. ``RowNotFound``) passes
    through after the rollback.
    """

    try:
        conn = pool.connect()
    except mysql.connector.Error as exc:
        raise StoreError(repr(exc)) from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except StoreError:
        conn.rollback()
        raise
    except Exception as exc:
        conn.rollback()
        raise StoreError(repr(exc)) from exc
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
