from __future__ import annotations

from dataclasses import dataclass

from mysql.connector import pooling

from ..core.constants import DEFAULT_DB_POOL_NAME, DEFAULT_DB_POOL_SIZE


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str


class DatabasePool:
    """Bounded pool of MySQL connections shared by every request.

    Created once by the container at startup and handed to repositories by
    reference. ``connect()`` checks a connection out; closing it returns it to
    the pool.
    """

    def __init__(self, config: DBConfig, *, pool_size: int = DEFAULT_DB_POOL_SIZE, pool_name: str = DEFAULT_DB_POOL_NAME):
        self._config = config
        self._pool = pooling.MySQLConnectionPool(
            pool_name=pool_name,
            pool_size=int(pool_size),
            pool_reset_session=True,
            host=config.host,
            port=int(config.port),
            user=config.user,
            password=config.password,
            database=config.database,
        )

    def connect(self):
        return self._pool.get_connection()
