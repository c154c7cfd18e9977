"""Deterministic slime chunk classification."""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np

from .java_random import JavaRandom, first_bounded_draws, to_int32, to_int64
from .models import Rect

SCRAMBLE_XOR = 987234911


def is_slime_chunk(seed: int, x: int, z: int) -> bool:
    """Return whether chunk ``(x, z)`` of world ``seed`` is a slime chunk."""
    scrambled = to_int64(seed + x * x * 4987142 + x * 5947611 + z * z * 4392871 + z * 389711)
    return JavaRandom(scrambled ^ SCRAMBLE_XOR).next_int(10) == 0


def wrap_int32(values: np.ndarray) -> np.ndarray:
    """Wrap int64 coordinates into the signed 32-bit range."""
    return ((values + (1 << 31)) & 0xFFFFFFFF) - (1 << 31)


def slime_grid(seed: int, x: int, z: int, size: int) -> np.ndarray:
    """Classify the ``size`` x ``size`` chunks starting at ``(x, z)``.

    The grid is indexed ``[dz, dx]``. Coordinates past the 32-bit range wrap
    around, as chunk coordinates do in the game.
    """
    xs = wrap_int32(np.arange(size, dtype=np.int64) + x)[np.newaxis, :]
    zs = wrap_int32(np.arange(size, dtype=np.int64) + z)[:, np.newaxis]
    # int64 array arithmetic wraps on overflow, matching to_int64.
    x_terms = xs * xs * np.int64(4987142) + xs * np.int64(5947611)
    z_terms = zs * zs * np.int64(4392871) + zs * np.int64(389711)
    scrambled = (np.int64(to_int64(seed)) + x_terms + z_terms) ^ np.int64(SCRAMBLE_XOR)
    return first_bounded_draws(scrambled, 10) == 0


class World:
    """A world identified by its 64-bit seed."""

    def __init__(self, seed: int) -> None:
        self.seed = to_int64(seed)

    def __repr__(self) -> str:
        return f"World(seed={self.seed})"

    def is_slime_chunk(self, x: int, z: int) -> bool:
        return is_slime_chunk(self.seed, to_int32(x), to_int32(z))

    def slime_grid(self, x: int, z: int, size: int) -> np.ndarray:
        return slime_grid(self.seed, x, z, size)

    def slime_chunks(self, rect: Rect) -> Iterator[tuple[int, int]]:
        """Yield every slime chunk inside ``rect``, row by row."""
        area = rect.normalized()
        for z in range(area.z0, area.z1):
            for x in range(area.x0, area.x1):
                if is_slime_chunk(self.seed, x, z):
                    yield x, z
