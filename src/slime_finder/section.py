"""Fixed-size square tiles of the chunk grid, the unit of parallel work."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import numpy as np

from .java_random import to_int32
from .mask import Mask
from .models import Rect, SearchResult

SECTION_SIZE = 128


class MaskBoundsError(ValueError):
    """Raised when a mask cannot fit inside a section."""


class SectionIndexError(IndexError):
    """Raised for a buffer index outside the section."""


class SectionStateError(RuntimeError):
    """Raised when a section operation is called out of order."""


class SectionState(str, Enum):
    """Lifecycle of a section; transitions only move forward."""

    EMPTY = "empty"
    COMPUTED = "computed"
    SEARCHED = "searched"


class ChunkClassifier(Protocol):
    def slime_grid(self, x: int, z: int, size: int) -> np.ndarray:
        ...


@dataclass(frozen=True, slots=True)
class MaskFootprint:
    """A mask flattened to the cells where it queries true."""

    width: int
    height: int
    cells: tuple[tuple[int, int], ...]


def prepare_mask(mask: Mask, size: int = SECTION_SIZE) -> MaskFootprint:
    """Check ``mask`` against the section size and snapshot its cells."""
    width, height = mask.bounds()
    if width >= size or height >= size:
        raise MaskBoundsError(f"Mask bounds {width}x{height} exceed section size {size}")
    if width < 1 or height < 1:
        raise MaskBoundsError(f"Mask bounds {width}x{height} must be positive")

    cells = tuple((x, z) for z in range(height) for x in range(width) if mask.query(x, z))
    return MaskFootprint(width=width, height=height, cells=cells)


class Section:
    """Dense boolean grid for chunks ``[x, x + size) x [z, z + size)``, indexed ``[z, x]``."""

    __slots__ = ("x", "z", "size", "state", "_cells")

    def __init__(self, x: int, z: int, size: int = SECTION_SIZE) -> None:
        self.x = x
        self.z = z
        self.size = size
        self.state = SectionState.EMPTY
        self._cells = np.zeros((size, size), dtype=np.uint8)

    def __repr__(self) -> str:
        return f"Section(x={self.x}, z={self.z}, size={self.size}, state={self.state.value})"

    def _check(self, x: int, z: int) -> None:
        if not 0 <= x < self.size:
            raise SectionIndexError(f"x={x} out of range for section size {self.size}")
        if not 0 <= z < self.size:
            raise SectionIndexError(f"z={z} out of range for section size {self.size}")

    def get(self, x: int, z: int) -> bool:
        self._check(x, z)
        return bool(self._cells[z, x])

    def set(self, x: int, z: int, value: bool) -> None:
        self._check(x, z)
        self._cells[z, x] = 1 if value else 0

    def compute(self, world: ChunkClassifier) -> None:
        """Classify every chunk of the section."""
        if self.state is not SectionState.EMPTY:
            raise SectionStateError(f"Cannot compute {self!r}: already {self.state.value}")

        grid = np.asarray(world.slime_grid(self.x, self.z, self.size))
        if grid.shape != self._cells.shape:
            raise SectionIndexError(f"Classifier returned shape {grid.shape}, expected {self._cells.shape}")
        self._cells[...] = grid
        self.state = SectionState.COMPUTED

    def overlap_counts(self, footprint: MaskFootprint) -> np.ndarray:
        """Return the overlap count of every placement, indexed ``[pz, px]``.

        A placement is the mask's top-left corner; only placements where the
        whole mask fits inside the section are counted.
        """
        rows = self.size - footprint.height + 1
        cols = self.size - footprint.width + 1
        counts = np.zeros((rows, cols), dtype=np.int32)
        for dx, dz in footprint.cells:
            np.add(counts, self._cells[dz : dz + rows, dx : dx + cols], out=counts)
        return counts

    def search(
        self,
        footprint: MaskFootprint,
        threshold: int,
        within: Rect | None = None,
    ) -> list[SearchResult]:
        """Return every placement whose overlap count reaches ``threshold``.

        When ``within`` is given, only placements whose world top-left corner
        lies inside it are reported. Reported coordinates are those of the
        mask centre, wrapped to the 32-bit chunk range.
        """
        if self.state is not SectionState.COMPUTED:
            raise SectionStateError(f"Cannot search {self!r}: section must be computed first")

        counts = self.overlap_counts(footprint)
        pz0, px0 = 0, 0
        pz1, px1 = counts.shape
        if within is not None:
            px0, px1 = max(px0, within.x0 - self.x), min(px1, within.x1 - self.x)
            pz0, pz1 = max(pz0, within.z0 - self.z), min(pz1, within.z1 - self.z)
        self.state = SectionState.SEARCHED
        if px0 >= px1 or pz0 >= pz1:
            return []

        window = counts[pz0:pz1, px0:px1]
        hit_z, hit_x = np.nonzero(window >= threshold)
        off_x = self.x + px0 + footprint.width // 2
        off_z = self.z + pz0 + footprint.height // 2
        return [
            SearchResult(count=int(window[pz, px]), x=to_int32(off_x + int(px)), z=to_int32(off_z + int(pz)))
            for pz, px in zip(hit_z.tolist(), hit_x.tolist())
        ]

    def render(self) -> str:
        """Draw the section as text: ``x`` marks a slime chunk."""
        return "\n".join(" ".join("x" if cell else " " for cell in row) for row in self._cells.tolist())
