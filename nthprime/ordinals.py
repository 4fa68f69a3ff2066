"""Ordinal suffixes for progress messages."""


def ordinal_suffix(n: int) -> str:
    """Return 'st', 'nd', 'rd' or 'th' for n (11, 12, 13 take 'th')."""
    if 10 <= n % 100 <= 20:
        return 'th'
    return {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')


def ordinal(n: int) -> str:
    """Format n as '1st', '22nd', '113th', ..."""
    return f"{n}{ordinal_suffix(n)}"
