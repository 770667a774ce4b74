"""Sync entities package."""

from .generation import Generation

__all__ = [
    "Generation",
]
