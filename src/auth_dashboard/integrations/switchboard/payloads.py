"""Helpers for reading fields out of switchboard ``data`` payloads."""

from typing import Any, Dict, List

from ...core.exceptions import InvalidResponseError


def require_field(data: Dict[str, Any], key: str) -> Any:
    """Get a non-null field from a payload or raise InvalidResponseError."""
    if not isinstance(data, dict) or data.get(key) is None:
        raise InvalidResponseError(f"Switchboard response is missing '{key}'", details={"field": key})
    return data[key]


def require_list(data: Dict[str, Any], key: str) -> List[Any]:
    """Get a list field from a payload or raise InvalidResponseError."""
    value = require_field(data, key)
    if not isinstance(value, list):
        raise InvalidResponseError(f"Switchboard field '{key}' is not a list", details={"field": key})
    return value
