from __future__ import annotations

import pytest

from src.user_api.user_api.core.exceptions import ConfigError
from src.user_api.user_api.users.credentials import CredentialPreparer


def test_prepare_produces_salted_scrypt_hash(credentials):
    h1 = credentials.prepare("p@ss")
    h2 = credentials.prepare("p@ss")

    assert h1.startswith("scrypt:")
    assert "p@ss" not in h1
    assert h1 != h2


def test_verify_accepts_right_password_only(credentials):
    stored = credentials.prepare("p@ss")

    assert credentials.verify("p@ss", stored)
    assert not credentials.verify("wrong", stored)


def test_verify_needs_the_same_secret(credentials):
    stored = credentials.prepare("p@ss")

    other = CredentialPreparer("another-secret", workers=1)
    try:
        assert not other.verify("p@ss", stored)
    finally:
        other.close()


def test_verify_rejects_garbage_hash(credentials):
    assert not credentials.verify("p@ss", "CHANGE_ME")


@pytest.mark.parametrize("secret", ["", None])
def test_missing_secret_is_config_error(secret):
    with pytest.raises(ConfigError):
        CredentialPreparer(secret)
