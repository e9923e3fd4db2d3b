"""Small text helpers shared by plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


def join_and(items: Iterable[str], mapper: Callable[[str], str] | None = None) -> str:
    """Join items as an English list: ``a``, ``a and b``, ``a, b, and c``."""

    values = [mapper(item) if mapper else item for item in items]
    if len(values) <= 1:
        return "".join(values)
    if len(values) == 2:
        return f"{values[0]} and {values[1]}"
    return f"{', '.join(values[:-1])}, and {values[-1]}"
