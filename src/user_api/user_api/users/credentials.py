from __future__ import annotations

import hashlib
import hmac
from concurrent.futures import ThreadPoolExecutor

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import DEFAULT_HASH_WORKERS
from ..core.exceptions import ConfigError

HASH_METHOD = "scrypt"


class CredentialPreparer:
    """Secret-keyed password hashing.

    The password is first keyed with HMAC-SHA256 over the server secret, then
    run through werkzeug's salted scrypt hash. A leaked ``users`` table is
    useless for offline cracking without the secret as well.

    Hashing is CPU-bound, so it runs on a small dedicated thread pool. The
    calling request thread waits for the result; the pool caps how many hashes
    run at once across all requests.
    """

    def __init__(self, secret: str, *, workers: int = DEFAULT_HASH_WORKERS):
        if not secret:
            raise ConfigError("HASH_SECRET must be set!")
        self._secret = secret.encode("utf-8")
        self._executor = ThreadPoolExecutor(max_workers=int(workers), thread_name_prefix="credential-hash")

    def _keyed(self, password: str) -> str:
        return hmac.new(self._secret, password.encode("utf-8"), hashlib.sha256).hexdigest()

    def _hash(self, password: str) -> str:
        return generate_password_hash(self._keyed(password), method=HASH_METHOD)

    def _check(self, password: str, password_hash: str) -> bool:
        try:
            return check_password_hash(password_hash, self._keyed(password))
        except ValueError:
            # Unknown method prefix or corrupted stored value.
            return False

    def prepare(self, password: str) -> str:
        return self._executor.submit(self._hash, password).result()

    def verify(self, password: str, password_hash: str) -> bool:
        return self._executor.submit(self._check, password, password_hash).result()

    def close(self) -> None:
        self._executor.shutdown(wait=True)
