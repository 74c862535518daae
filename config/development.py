import os

from .config import db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="root")
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))

# Server-side key mixed into every password hash. No default: startup fails without it.
HASH_SECRET = os.getenv("HASH_SECRET")
HASH_WORKERS = int(os.getenv("HASH_WORKERS", "2"))

# Map "no such id" to 404 instead of the historical 500.
NOT_FOUND_AS_404 = env_flag("NOT_FOUND_AS_404", "0")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
