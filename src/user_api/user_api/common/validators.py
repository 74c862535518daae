from __future__ import annotations

import re
from typing import Any, Mapping

from ..core.constants import USER_ID_MAX, USER_ID_MIN
from ..core.exceptions import MalformedRequest

# Plain ASCII digits only; int() alone would also accept "1_0" and surrounding spaces.
_INT_RE = re.compile(r"[+-]?[0-9]+")


def require_object(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, dict):
        raise MalformedRequest("request body must be a JSON object")
    return payload


def require_str(payload: Mapping[str, Any], field_name: str) -> str:
    if field_name not in payload:
        raise MalformedRequest(f"missing field `{field_name}`")
    value = payload[field_name]
    if not isinstance(value, str):
        raise MalformedRequest(f"invalid type for `{field_name}`: expected a string")
    try:
        # JSON allows lone surrogate escapes ("\ud800"); they are not valid text.
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise MalformedRequest(f"invalid string for `{field_name}`")
    return value


def require_int32(raw: str, field_name: str) -> int:
    if raw is None or not _INT_RE.fullmatch(raw):
        raise MalformedRequest(f"`{field_name}` must be an integer, got {raw!r}")
    value = int(raw)
    if not USER_ID_MIN <= value <= USER_ID_MAX:
        raise MalformedRequest(f"`{field_name}` out of range: {value}")
    return value
