from __future__ import annotations

import random

from slime_finder.models import SearchResult
from slime_finder.ranking import merge_batch, needs_swap, sort_key


def test_higher_count_ranks_first() -> None:
    assert needs_swap(SearchResult(2, 0, 0), SearchResult(3, 500, 500))
    assert not needs_swap(SearchResult(3, 500, 500), SearchResult(2, 0, 0))


def test_closer_to_origin_ranks_first_on_equal_count() -> None:
    assert needs_swap(SearchResult(4, 10, 10), SearchResult(4, -3, 4))
    assert not needs_swap(SearchResult(4, -3, 4), SearchResult(4, 10, 10))


def test_position_breaks_remaining_ties() -> None:
    assert needs_swap(SearchResult(1, -5, 0), SearchResult(1, 5, 0))
    assert not needs_swap(SearchResult(1, 5, 0), SearchResult(1, -5, 0))
    assert needs_swap(SearchResult(1, 3, -4), SearchResult(1, 3, 4))
    assert not needs_swap(SearchResult(1, 3, 4), SearchResult(1, 3, 4))


def test_merge_is_independent_of_arrival_order() -> None:
    rng = random.Random(7)
    pool = [SearchResult(rng.randint(1, 4), rng.randint(-20, 20), rng.randint(-20, 20)) for _ in range(300)]
    expected = sorted(pool, key=sort_key)

    for attempt in range(5):
        shuffled = pool[:]
        random.Random(attempt).shuffle(shuffled)
        merged: list[SearchResult] = []
        for start in range(0, len(shuffled), 17):
            merge_batch(merged, shuffled[start : start + 17])
        assert merged == expected


def test_merged_list_satisfies_ordering_pairwise() -> None:
    merged: list[SearchResult] = []
    merge_batch(merged, [SearchResult(1, 0, 1), SearchResult(3, 9, 9)])
    merge_batch(merged, [SearchResult(3, 1, 1), SearchResult(1, 1, 0), SearchResult(2, 0, 0)])

    assert merged == [
        SearchResult(3, 1, 1),
        SearchResult(3, 9, 9),
        SearchResult(2, 0, 0),
        SearchResult(1, 1, 0),
        SearchResult(1, 0, 1),
    ]
    assert not any(needs_swap(a, b) for a, b in zip(merged, merged[1:]))
