"""Concurrent tiled search over a rectangle of the chunk grid."""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Iterator

from .config import settings
from .mask import Mask
from .models import Rect, SearchResult
from .ranking import merge_batch
from .section import SECTION_SIZE, MaskFootprint, Section, prepare_mask
from .world import World

_STOP = object()


class SearchCancelledError(RuntimeError):
    """Raised when a search is cancelled before every section was searched."""


def tile_sections(rect: Rect, mask_width: int, mask_height: int, size: int = SECTION_SIZE) -> Iterator[tuple[int, int]]:
    """Yield section origins covering ``rect``.

    Neighbouring sections overlap by one less than the mask size, so every
    placement is fully contained in exactly one section's search range.
    """
    area = rect.normalized()
    step_x = size - mask_width + 1
    step_z = size - mask_height + 1
    for x in range(area.x0, area.x1, step_x):
        for z in range(area.z0, area.z1, step_z):
            yield x, z


class SearchCoordinator:
    """Producer, worker pool and merging consumer for one world."""

    def __init__(
        self,
        world: World,
        *,
        workers: int,
        section_size: int = SECTION_SIZE,
        section_queue_size: int = 8,
        result_queue_size: int = 8,
        logger: logging.Logger | None = None,
    ) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self._world = world
        self._workers = workers
        self._section_size = section_size
        self._section_queue_size = section_queue_size
        self._result_queue_size = result_queue_size
        self._logger = logger or logging.getLogger("slime_finder.coordinator")

    def search(
        self,
        rect: Rect,
        threshold: int,
        mask: Mask,
        *,
        cancel: threading.Event | None = None,
    ) -> list[SearchResult]:
        """Return every placement in ``rect`` reaching ``threshold``, best first."""
        footprint = prepare_mask(mask, self._section_size)
        area = rect.normalized()
        cancel = cancel or threading.Event()

        sections: queue.Queue[object] = queue.Queue(maxsize=self._section_queue_size)
        batches: queue.Queue[object] = queue.Queue(maxsize=self._result_queue_size)
        failures: list[BaseException] = []

        started = time.perf_counter()
        self._logger.info(
            "search_started",
            extra={"seed": self._world.seed, "rect": area, "threshold": threshold, "workers": self._workers},
        )

        workers = [
            threading.Thread(
                target=self._work,
                args=(footprint, threshold, area, sections, batches, cancel, failures),
                name=f"slime-search-worker-{i}",
                daemon=True,
            )
            for i in range(self._workers)
        ]
        for worker in workers:
            worker.start()

        producer = threading.Thread(
            target=self._produce,
            args=(area, footprint, sections, batches, workers, cancel),
            name="slime-search-producer",
            daemon=True,
        )
        producer.start()

        results: list[SearchResult] = []
        batch_count = 0
        while True:
            batch = batches.get()
            if batch is _STOP:
                break
            merge_batch(results, batch)
            batch_count += 1
        producer.join()

        if failures:
            raise failures[0]
        if cancel.is_set():
            self._logger.warning("search_cancelled", extra={"partial_results": len(results)})
            raise SearchCancelledError("Search was cancelled before completion")

        self._logger.info(
            "search_finished",
            extra={
                "results": len(results),
                "batches": batch_count,
                "elapsed_seconds": round(time.perf_counter() - started, 3),
            },
        )
        return results

    def _produce(
        self,
        area: Rect,
        footprint: MaskFootprint,
        sections: queue.Queue[object],
        batches: queue.Queue[object],
        workers: list[threading.Thread],
        cancel: threading.Event,
    ) -> None:
        try:
            for x, z in tile_sections(area, footprint.width, footprint.height, self._section_size):
                if cancel.is_set():
                    break
                sections.put(Section(x, z, self._section_size))
        finally:
            for _ in workers:
                sections.put(_STOP)
            for worker in workers:
                worker.join()
            batches.put(_STOP)

    def _work(
        self,
        footprint: MaskFootprint,
        threshold: int,
        area: Rect,
        sections: queue.Queue[object],
        batches: queue.Queue[object],
        cancel: threading.Event,
        failures: list[BaseException],
    ) -> None:
        while True:
            section = sections.get()
            if section is _STOP:
                return
            if cancel.is_set():
                continue

            try:
                section.compute(self._world)
                results = section.search(footprint, threshold, within=area)
            except Exception as exc:  # noqa: BLE001 - surfaced to the caller after shutdown.
                self._logger.exception("search_worker_failed", extra={"section": repr(section)})
                failures.append(exc)
                cancel.set()
                continue

            self._logger.debug("section_searched", extra={"x": section.x, "z": section.z, "results": len(results)})
            if results:
                batches.put(results)


def search(
    seed: int,
    x0: int,
    z0: int,
    x1: int,
    z1: int,
    threshold: int,
    mask: Mask,
    *,
    workers: int | None = None,
    section_size: int = SECTION_SIZE,
    cancel: threading.Event | None = None,
) -> list[SearchResult]:
    """Search world ``seed`` for mask placements reaching ``threshold``.

    Placements are reported when the mask's top-left corner lies inside the
    rectangle spanned by ``(x0, z0)`` and ``(x1, z1)``; corners may be given
    in any order. Results are ranked by count, then distance from the
    origin, then ``x`` and ``z`` descending.
    """
    coordinator = SearchCoordinator(
        World(seed),
        workers=workers if workers is not None else settings.worker_count,
        section_size=section_size,
        section_queue_size=settings.section_queue_size,
        result_queue_size=settings.result_queue_size,
    )
    return coordinator.search(Rect(x0, z0, x1, z1), threshold, mask, cancel=cancel)
