"""Utility helpers for auth-dashboard."""

from .addresses import format_address, shorten_address, same_address
from .timestamps import parse_timestamp
from .validation import (
    validate_switchboard_url,
    validate_address,
    validate_group_name,
    normalize_description,
    validate_operation_name,
)

__all__ = [
    "format_address",
    "shorten_address",
    "same_address",
    "parse_timestamp",
    "validate_switchboard_url",
    "validate_address",
    "validate_group_name",
    "normalize_description",
    "validate_operation_name",
]
