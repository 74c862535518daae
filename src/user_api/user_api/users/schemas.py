from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..common.validators import require_int32, require_object, require_str


@dataclass(frozen=True)
class CreateUserRequest:
    username: str
    # Plaintext; kept out of repr so it never ends up in a log line.
    password: str = field(repr=False)

    @classmethod
    def from_json(cls, payload: Any) -> "CreateUserRequest":
        body = require_object(payload)
        return cls(username=require_str(body, "username"), password=require_str(body, "password"))


@dataclass(frozen=True)
class UpdateUserRequest:
    username: str

    @classmethod
    def from_json(cls, payload: Any) -> "UpdateUserRequest":
        body = require_object(payload)
        return cls(username=require_str(body, "username"))


def decode_user_id(raw: str) -> int:
    return require_int32(raw, "id")
