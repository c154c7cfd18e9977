from __future__ import annotations

from collections.abc import Callable

import pytest


def _reference_is_slime(seed: int, x: int, z: int) -> bool:
    mask48 = (1 << 48) - 1
    state = ((seed + x * x * 4987142 + x * 5947611 + z * z * 4392871 + z * 389711) ^ 987234911 ^ 0x5DEECE66D) & mask48
    while True:
        state = (state * 0x5DEECE66D + 0xB) & mask48
        bits = state >> 17
        value = bits % 10
        if bits - value + 9 < 2**31:
            return value == 0


@pytest.fixture
def reference_is_slime() -> Callable[[int, int, int], bool]:
    return _reference_is_slime
