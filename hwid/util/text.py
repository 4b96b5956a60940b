"""
MIT License

Grammar helpers for the identifier text format.
"""

from __future__ import annotations

from typing import Iterable

ITEM_SEPARATOR = ", "


def join_items(items: Iterable[str]) -> str:
    """Join serialized items with the canonical separator, keeping every entry."""
    return ITEM_SEPARATOR.join(items)


def enclose(label: str, items: Iterable[str], opener: str, closer: str) -> str:
    """Render ``label`` followed by ``items`` wrapped in ``opener``/``closer``."""
    return f"{label}{opener}{join_items(items)}{closer}"


__all__ = ["ITEM_SEPARATOR", "join_items", "enclose"]
