import os

from .config import db_config_from_env, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))

HASH_SECRET = os.getenv("HASH_SECRET")
HASH_WORKERS = int(os.getenv("HASH_WORKERS", "4"))

NOT_FOUND_AS_404 = env_flag("NOT_FOUND_AS_404", "0")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
