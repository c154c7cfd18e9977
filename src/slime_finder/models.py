from __future__ import annotations

from dataclasses import dataclass

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Overlap ``count`` for the mask centred on chunk ``(x, z)``."""

    count: int
    x: int
    z: int

    @property
    def distance_sq(self) -> int:
        return self.x * self.x + self.z * self.z


@dataclass(frozen=True, slots=True)
class Rect:
    """Half-open chunk rectangle ``[x0, x1) x [z0, z1)``."""

    x0: int
    z0: int
    x1: int
    z1: int

    def __post_init__(self) -> None:
        for name in ("x0", "z0", "x1", "z1"):
            value = getattr(self, name)
            if not INT32_MIN <= value <= INT32_MAX:
                raise ValueError(f"{name}={value} is outside the 32-bit chunk coordinate range")

    def normalized(self) -> Rect:
        return Rect(
            x0=min(self.x0, self.x1),
            z0=min(self.z0, self.z1),
            x1=max(self.x0, self.x1),
            z1=max(self.z0, self.z1),
        )

    @property
    def is_empty(self) -> bool:
        return self.x0 == self.x1 or self.z0 == self.z1

    def contains(self, x: int, z: int) -> bool:
        return self.x0 <= x < self.x1 and self.z0 <= z < self.z1
