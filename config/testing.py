import os

from .config import db_config_from_env, env_flag

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="12345")
DB_POOL_SIZE = 2

HASH_SECRET = os.getenv("HASH_SECRET", "test-hash-secret")
HASH_WORKERS = 1

NOT_FOUND_AS_404 = env_flag("NOT_FOUND_AS_404", "0")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
