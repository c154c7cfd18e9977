"""Slime chunk cluster search."""

from .java_random import JavaRandom, first_bounded_draws
from .mask import BitmapMask, Mask, RectangleMask
from .models import Rect, SearchResult
from .ranking import merge_batch, needs_swap, sort_key
from .coordinator import SearchCancelledError, SearchCoordinator, search, tile_sections
from .section import (
    SECTION_SIZE,
    MaskBoundsError,
    MaskFootprint,
    Section,
    SectionIndexError,
    SectionState,
    SectionStateError,
    prepare_mask,
)
from .world import World, is_slime_chunk, slime_grid

__all__ = [
    "BitmapMask",
    "JavaRandom",
    "Mask",
    "MaskBoundsError",
    "MaskFootprint",
    "Rect",
    "RectangleMask",
    "SECTION_SIZE",
    "SearchCancelledError",
    "SearchCoordinator",
    "SearchResult",
    "Section",
    "SectionIndexError",
    "SectionState",
    "SectionStateError",
    "World",
    "first_bounded_draws",
    "is_slime_chunk",
    "merge_batch",
    "needs_swap",
    "prepare_mask",
    "search",
    "slime_grid",
    "sort_key",
    "tile_sections",
]
