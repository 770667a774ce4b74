"""Address display helpers."""

from typing import Optional


def shorten_address(address: str) -> str:
    """Shorten an address to ``0xabcd...wxyz`` form."""
    if len(address) <= 10:
        return address
    return f"{address[:6]}...{address[-4:]}"


def format_address(address: str, display_name: Optional[str] = None) -> str:
    """Format an address for display.

    Shows ``"name.eth (0xab...cd)"`` when a display name is known and just
    the shortened address otherwise.
    """
    short = shorten_address(address)
    return f"{display_name} ({short})" if display_name else short


def same_address(left: Optional[str], right: Optional[str]) -> bool:
    """Compare two addresses case-insensitively."""
    if left is None or right is None:
        return False
    return left.strip().lower() == right.strip().lower()
