"""CLI entrypoint for Slime Finder."""

from __future__ import annotations

import logging
from dataclasses import asdict

import typer
from rich import print

from slime_finder.config import settings
from slime_finder.mask import RectangleMask
from slime_finder.models import Rect
from slime_finder.coordinator import search as run_search
from slime_finder.section import SECTION_SIZE, MaskBoundsError, Section
from slime_finder.world import World

app = typer.Typer(help="Find clusters of slime chunks in a world seed")


@app.callback()
def configure(log_level: str = typer.Option(None, help="Override the configured log level")) -> None:
    level = (log_level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")
    logging.basicConfig(level=level)


@app.command("show-config")
def show_config() -> None:
    """Show runtime configuration."""
    print(settings.model_dump())


@app.command()
def chunk(
    seed: int = typer.Option(..., help="World seed"),
    x: int = typer.Option(..., help="Chunk X"),
    z: int = typer.Option(..., help="Chunk Z"),
) -> None:
    """Report whether a single chunk is a slime chunk."""
    print({"seed": seed, "x": x, "z": z, "slime_chunk": World(seed).is_slime_chunk(x, z)})


@app.command()
def chunks(
    seed: int = typer.Option(..., help="World seed"),
    x0: int = typer.Option(..., help="First corner X"),
    z0: int = typer.Option(..., help="First corner Z"),
    x1: int = typer.Option(..., help="Second corner X"),
    z1: int = typer.Option(..., help="Second corner Z"),
) -> None:
    """List the slime chunks of a rectangle."""
    found = [{"x": x, "z": z} for x, z in World(seed).slime_chunks(Rect(x0, z0, x1, z1))]
    print({"seed": seed, "count": len(found), "slime_chunks": found})


@app.command("show-section")
def show_section(
    seed: int = typer.Option(..., help="World seed"),
    x: int = typer.Option(0, help="Section origin X"),
    z: int = typer.Option(0, help="Section origin Z"),
    size: int = typer.Option(SECTION_SIZE, help="Section side length"),
) -> None:
    """Draw the slime chunks of one section."""
    section = Section(x, z, size)
    section.compute(World(seed))
    typer.echo(section.render())


@app.command()
def search(
    seed: int = typer.Option(..., help="World seed"),
    x0: int = typer.Option(..., help="First corner X"),
    z0: int = typer.Option(..., help="First corner Z"),
    x1: int = typer.Option(..., help="Second corner X"),
    z1: int = typer.Option(..., help="Second corner Z"),
    threshold: int = typer.Option(..., help="Minimum slime chunks under the mask"),
    mask_width: int = typer.Option(..., help="Rectangle mask width in chunks"),
    mask_height: int = typer.Option(..., help="Rectangle mask height in chunks"),
    workers: int = typer.Option(None, help="Worker threads (defaults to SLIME_FINDER_WORKER_COUNT)"),
    limit: int = typer.Option(20, help="How many of the best results to print"),
) -> None:
    """Rank rectangle placements by how many slime chunks they cover."""
    try:
        mask = RectangleMask(mask_width, mask_height)
        results = run_search(seed, x0, z0, x1, z1, threshold, mask, workers=workers)
    except MaskBoundsError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except ValueError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    print({"total_results": len(results), "results": [asdict(result) for result in results[:limit]]})


if __name__ == "__main__":
    app()
