from typing import Optional


def format_address(address: str) -> Optional[str]:
    """Shorten an address to ``0x1234...abcd`` for display."""
    if len(address) != 42:
        return None
    return f"{address[:6]}...{address[38:]}"
