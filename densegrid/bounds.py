# densegrid/bounds.py
from __future__ import annotations


def inclusive_invalid(val: int, limit: int) -> bool:
    """True when ``val`` is not an existing index below ``limit``."""
    return val < 0 or val >= limit


def exclusive_invalid(val: int, limit: int) -> bool:
    """True when ``val`` is not a legal insertion position; ``limit`` itself appends."""
    return val < 0 or val > limit
