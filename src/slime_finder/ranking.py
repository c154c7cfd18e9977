"""Global ordering of search results and the streaming insertion merge."""

from __future__ import annotations

from collections.abc import Iterable

from .models import SearchResult


def needs_swap(a: SearchResult, b: SearchResult) -> bool:
    """Return whether ``b`` ranks ahead of its predecessor ``a``."""
    if a.count != b.count:
        return a.count < b.count

    ad2, bd2 = a.distance_sq, b.distance_sq
    if ad2 != bd2:
        return ad2 > bd2

    # Position only breaks ties so the order is total.
    if a.x != b.x:
        return a.x < b.x
    return a.z < b.z


def sort_key(result: SearchResult) -> tuple[int, int, int, int]:
    return (-result.count, result.distance_sq, -result.x, -result.z)


def merge_batch(results: list[SearchResult], batch: Iterable[SearchResult]) -> list[SearchResult]:
    """Insert ``batch`` into the already ranked ``results`` in place."""
    start = len(results)
    results.extend(batch)
    for i in range(start, len(results)):
        j = i
        while j > 0 and needs_swap(results[j - 1], results[j]):
            results[j - 1], results[j] = results[j], results[j - 1]
            j -= 1
    return results
