"""Helpers to coerce arbitrary values into push data strings."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any


def stringify_data_value(value: Any) -> str:
    """Return ``value`` as the string the gateway's data section requires."""

    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str)
    return str(value)


def stringify_data(data: dict[Any, Any] | None) -> dict[str, str]:
    """Return a copy of ``data`` with string keys and string values."""

    return {str(key): stringify_data_value(value) for key, value in (data or {}).items()}


__all__ = ["stringify_data", "stringify_data_value"]
