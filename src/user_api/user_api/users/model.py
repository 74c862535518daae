from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class UserPublicView:
    """The subset of a ``users`` row that is safe to serialize.

    The stored password hash is write-only: repositories never select it, so
    no object carrying it is ever built on the read path.
    """

    id: int
    username: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "username": self.username}
