"""48-bit linear congruential generator compatible with ``java.util.Random``."""

from __future__ import annotations

import numpy as np

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
STATE_MASK = (1 << 48) - 1


def to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def to_int64(value: int) -> int:
    value &= 0xFFFFFFFFFFFFFFFF
    return value - (1 << 64) if value >= (1 << 63) else value


class JavaRandom:
    """Reproduces the bit-exact draw sequence of ``java.util.Random``.

    Only the operations needed for chunk classification are provided.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = 0
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        self._state = (seed ^ MULTIPLIER) & STATE_MASK

    def next(self, bits: int) -> int:
        """Advance the state and return its top ``bits`` bits as a signed 32-bit int."""
        self._state = (self._state * MULTIPLIER + ADDEND) & STATE_MASK
        return to_int32(self._state >> (48 - bits))

    def next_int(self, bound: int | None = None) -> int:
        if bound is None:
            return self.next(32)
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")

        if bound & -bound == bound:
            return (bound * self.next(31)) >> 31

        while True:
            bits = self.next(31)
            value = bits % bound
            # Java detects this case through signed 32-bit overflow.
            if bits - value + (bound - 1) < (1 << 31):
                return value


_MULTIPLIER_U64 = np.uint64(MULTIPLIER)
_ADDEND_U64 = np.uint64(ADDEND)
_STATE_MASK_U64 = np.uint64(STATE_MASK)


def first_bounded_draws(seeds: np.ndarray, bound: int) -> np.ndarray:
    """Return ``JavaRandom(seed).next_int(bound)`` for every element of ``seeds``.

    ``seeds`` holds signed 64-bit seeds; the result has the same shape.
    """
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")

    state = (np.asarray(seeds, dtype=np.int64).view(np.uint64) ^ _MULTIPLIER_U64) & _STATE_MASK_U64
    bound_u64 = np.uint64(bound)

    def _next31(current: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        advanced = (current * _MULTIPLIER_U64 + _ADDEND_U64) & _STATE_MASK_U64
        return advanced, advanced >> np.uint64(17)

    state, bits = _next31(state)
    if bound & -bound == bound:
        return ((bits * bound_u64) >> np.uint64(31)).astype(np.int64)

    values = bits % bound_u64
    rejected = bits - values + np.uint64(bound - 1) >= np.uint64(1 << 31)
    while rejected.any():
        state[rejected], bits[rejected] = _next31(state[rejected])
        values[rejected] = bits[rejected] % bound_u64
        rejected &= bits - values + np.uint64(bound - 1) >= np.uint64(1 << 31)
    return values.astype(np.int64)
