"""A hexagon drawn with stars."""

from __future__ import annotations

__all__ = ["hexagon"]


def hexagon(n: int) -> str:
    """A star hexagon with sides of n: 2n - 1 lines, widest in the middle."""
    widths = list(range(n)) + list(range(n - 2, -1, -1))
    return "".join(" " * (n - i - 1) + "*" * (n + 2 * i) + "\n" for i in widths)