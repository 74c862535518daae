from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_DB_POOL_SIZE, DEFAULT_HASH_WORKERS
from .database.connection import DBConfig, DatabasePool
from .users.credentials import CredentialPreparer
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    pool: DatabasePool

    users_repo: UserRepository
    credentials: CredentialPreparer

    user_service: UserService


def build_container(
    *,
    db_config: dict,
    hash_secret: str,
    pool_size: int = DEFAULT_DB_POOL_SIZE,
    hash_workers: int = DEFAULT_HASH_WORKERS,
) -> Container:
    # Credentials first: a missing secret should fail before we open any connection.
    credentials = CredentialPreparer(hash_secret, workers=hash_workers)

    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    pool = DatabasePool(config, pool_size=pool_size)

    users_repo = MySQLUserRepository(pool)
    user_service = UserService(users_repo, credentials)

    return Container(
        pool=pool,
        users_repo=users_repo,
        credentials=credentials,
        user_service=user_service,
    )
