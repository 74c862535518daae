from __future__ import annotations

import pytest

import config.testing as testing_settings
from config import get_settings_module
from src.user_api.user_api.core.exceptions import ConfigError
from src.user_api.user_api.main import create_app


@pytest.mark.parametrize(
    "env,expected",
    [("production", "config.production"), ("prod", "config.production"), ("TEST", "config.testing"), ("anything", "config.development")],
)
def test_settings_module_selection(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_missing_hash_secret_fails_at_startup(monkeypatch, container):
    monkeypatch.setattr(testing_settings, "HASH_SECRET", "")

    with pytest.raises(ConfigError):
        create_app(container=container, settings_module="config.testing")


def test_not_found_flag_is_copied_into_app_config(monkeypatch, container):
    monkeypatch.setattr(testing_settings, "NOT_FOUND_AS_404", True)

    app = create_app(container=container, settings_module="config.testing")
    assert app.config["NOT_FOUND_AS_404"] is True
