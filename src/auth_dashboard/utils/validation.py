"""Input validation helpers.

Every helper returns the normalized value or raises ValidationError, so
callers can reject bad input before anything is sent to the switchboard.
"""

from typing import Optional
from urllib.parse import urlparse

from ..core.exceptions import ValidationError


def validate_switchboard_url(url: Optional[str]) -> str:
    """Validate and normalize a switchboard GraphQL endpoint URL."""
    trimmed = (url or "").strip()
    if not trimmed:
        raise ValidationError("Please enter a URL", field="url")

    parsed = urlparse(trimmed)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError("Please enter a valid URL", field="url")
    return trimmed


def validate_address(address: Optional[str]) -> str:
    """Validate a user address and return it trimmed."""
    trimmed = (address or "").strip()
    if not trimmed:
        raise ValidationError("User address is required", field="user_address")
    return trimmed


def validate_group_name(name: Optional[str]) -> str:
    """Validate a group name and return it trimmed."""
    trimmed = (name or "").strip()
    if not trimmed:
        raise ValidationError("Group name is required", field="name")
    return trimmed


def normalize_description(description: Optional[str]) -> Optional[str]:
    """Trim an optional description, mapping blank text to None."""
    trimmed = (description or "").strip()
    return trimmed or None


def validate_operation_name(operation_name: Optional[str]) -> str:
    """Validate an operation type name."""
    trimmed = (operation_name or "").strip()
    if not trimmed:
        raise ValidationError("Operation type is required", field="operation_type")
    return trimmed
