from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_DB_POOL_SIZE, DEFAULT_HASH_WORKERS
from .core.exceptions import ConfigError
from .database.bootstrap import apply_schema, as_target, list_tables
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(str(getattr(settings, "LOG_LEVEL", "INFO")))

    # Resolved once here; a process without a secret never starts serving.
    hash_secret = getattr(settings, "HASH_SECRET", None)
    if not hash_secret:
        raise ConfigError("HASH_SECRET must be set!")

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["NOT_FOUND_AS_404"] = bool(getattr(settings, "NOT_FOUND_AS_404", False))
    db_config = getattr(settings, "DB_CONFIG")

    logger.info("settings=%s db=%s", settings_module, as_target(db_config).describe())

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            hash_secret=hash_secret,
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_DB_POOL_SIZE)),
            hash_workers=int(getattr(settings, "HASH_WORKERS", DEFAULT_HASH_WORKERS)),
        )

    app.extensions["user_api.container"] = container

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"ok": True})

    register_users(app, container)

    return app
