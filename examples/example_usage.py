"""Example: use the service layer directly (no Flask).

Creates a user, renames it, then deletes it again against the configured DB.
"""

import importlib

from config import get_settings_module

from src.user_api.user_api.container import build_container
from src.user_api.user_api.users.schemas import CreateUserRequest, UpdateUserRequest


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, hash_secret=settings.HASH_SECRET)
    service = container.user_service
    try:
        user = service.create_user(CreateUserRequest(username="example", password="example-pass"))
        print(service.update_user(user.id, UpdateUserRequest(username="example-renamed")))
        print(service.delete_user(user.id))
    finally:
        container.credentials.close()


if __name__ == "__main__":
    main()
