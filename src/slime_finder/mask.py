"""Search masks: bounded 2D patterns queried cell by cell."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class Mask(Protocol):
    """Read-only pattern shared by every search worker."""

    def bounds(self) -> tuple[int, int]:
        """Return ``(width, height)`` of the pattern."""

    def query(self, x: int, z: int) -> bool:
        """Return whether cell ``(x, z)`` belongs to the pattern."""


class RectangleMask:
    """Every cell of a ``width`` x ``height`` rectangle."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Mask dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height

    def bounds(self) -> tuple[int, int]:
        return self._width, self._height

    def query(self, x: int, z: int) -> bool:
        return 0 <= x < self._width and 0 <= z < self._height


class BitmapMask:
    """Pattern given as rows of booleans, ``rows[z][x]``."""

    def __init__(self, rows: Sequence[Sequence[bool]]) -> None:
        if not rows or not rows[0]:
            raise ValueError("Mask needs at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("Mask rows must all have the same length")
        self._rows = tuple(tuple(bool(cell) for cell in row) for row in rows)

    def bounds(self) -> tuple[int, int]:
        return len(self._rows[0]), len(self._rows)

    def query(self, x: int, z: int) -> bool:
        return self._rows[z][x]
