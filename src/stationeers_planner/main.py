"""CLI entrypoint for the Stationeers planner."""

from __future__ import annotations

from pathlib import Path

import typer
from rich import print

from stationeers_planner.config import Settings, settings
from stationeers_planner.grid import GRIDS, floor_index, snap_placement, to_micro_grid
from stationeers_planner.mapping import (
    build_ore_legend,
    contains_point,
    describe_site,
    display_to_world,
    fit_rect,
    inspect_site,
)
from stationeers_planner.models import Vec2, Vec3, World
from stationeers_planner.telemetry import configure_logging
from stationeers_planner.world import WORLD_CATALOG, WorldLoader, WorldParseError, find_catalog_entry

app = typer.Typer(help="Stationeers world data and build-grid tools")


def _settings_for(game_path: str | None) -> Settings:
    if game_path:
        return settings.model_copy(update={"game_path": Path(game_path)})
    return settings


def _build_loader(game_path: str | None = None) -> WorldLoader:
    return WorldLoader.from_settings(_settings_for(game_path))


def _load_world(world: str, game_path: str | None, with_textures: bool = True) -> World:
    entry = find_catalog_entry(world)
    if entry is None:
        raise typer.BadParameter(f"Unknown world '{world}'. Known: {', '.join(e.folder for e in WORLD_CATALOG)}")
    try:
        return _build_loader(game_path).load_world(entry, with_textures=with_textures)
    except WorldParseError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


def _summarize(world: World) -> dict:
    return {
        "id": world.id,
        "display_name": world.display_name,
        "world_size": world.world_size,
        "range": [world.coordinate_min.x, world.coordinate_max.x],
        "gravity": world.gravity,
        "start_locations": [
            {"name": s.display_name, "position": tuple(s.position), "radius": s.spawn_radius}
            for s in world.start_locations
        ],
        "ore_legend": [{"ore": e.label, "color": e.color.hex()} for e in build_ore_legend(world)],
        "named_regions": [r.display_name for r in world.named_regions],
        "textures": {
            "minimap": world.minimap is not None,
            "ore": world.ore_texture is not None,
            "named_regions": world.named_regions_texture is not None,
        },
    }


@app.callback()
def main(log_level: str = typer.Option(None, help="Override the configured log level")) -> None:
    configure_logging(log_level or settings.log_level)


@app.command()
def config() -> None:
    """Show resolved configuration."""
    print(
        {
            "app_name": settings.app_name,
            "game_path": str(settings.game_path),
            "worlds_root": str(settings.worlds_root),
            "assets_root": str(settings.assets_root),
            "load_workers": settings.load_workers,
        }
    )


@app.command()
def worlds() -> None:
    """List the known worlds."""
    print([{"folder": e.folder, "file": e.definition_file, "name": e.display_name} for e in WORLD_CATALOG])


@app.command()
def inspect(
    world: str = typer.Argument(..., help="World folder or display name, e.g. Mars2"),
    game_path: str = typer.Option(None, help="Stationeers install root"),
) -> None:
    """Load one world and print its summary."""
    print(_summarize(_load_world(world, game_path)))


@app.command("load-all")
def load_all(
    game_path: str = typer.Option(None, help="Stationeers install root"),
    workers: int = typer.Option(None, help="Worker threads (defaults to configured load_workers)"),
    skip_textures: bool = typer.Option(False, help="Parse definitions only"),
) -> None:
    """Load every known world, skipping the ones that fail."""
    loaded = _build_loader(game_path).load_all_worlds(
        max_workers=workers or settings.load_workers,
        with_textures=not skip_textures,
    )
    print(
        {
            "loaded": {
                folder: {"start_locations": len(w.start_locations), "ore_regions": len(w.ore_regions)}
                for folder, w in loaded.items()
            },
            "missing": [e.folder for e in WORLD_CATALOG if e.folder not in loaded],
        }
    )
    if not loaded:
        raise typer.Exit(code=1)


@app.command()
def site(
    world: str = typer.Argument(..., help="World folder or display name"),
    x: float = typer.Option(..., help="World X"),
    y: float = typer.Option(..., help="World Y"),
    game_path: str = typer.Option(None, help="Stationeers install root"),
) -> None:
    """Describe a build site: nearest spawn, ore access and region."""
    report = inspect_site(_load_world(world, game_path), Vec2(x, y))
    print({**describe_site(report), "on_world": report.on_world})


@app.command()
def snap(
    x: float = typer.Option(..., help="X"),
    y: float = typer.Option(..., help="Y (height)"),
    z: float = typer.Option(..., help="Z"),
    grid: str = typer.Option("main", help="main or small"),
) -> None:
    """Snap a point to a placement grid and its floor."""
    if grid not in GRIDS:
        raise typer.BadParameter(f"grid must be one of {sorted(GRIDS)}")
    snapped = snap_placement(Vec3(x, y, z), GRIDS[grid])
    print({"snapped": tuple(snapped), "floor": floor_index(snapped.y), "micro_grid": tuple(to_micro_grid(snapped))})


@app.command("fit-rect")
def fit_rect_command(
    container_width: float = typer.Option(...),
    container_height: float = typer.Option(...),
    image_width: float = typer.Option(...),
    image_height: float = typer.Option(...),
) -> None:
    """Letterboxed rect of an image inside a container."""
    rect = fit_rect(container_width, container_height, image_width, image_height)
    print({"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height, "empty": rect.is_empty})


@app.command("display-to-world")
def display_to_world_command(
    x: float = typer.Option(..., help="Display-local X"),
    y: float = typer.Option(..., help="Display-local Y"),
    container_width: float = typer.Option(...),
    container_height: float = typer.Option(...),
    image_width: float = typer.Option(1024.0),
    image_height: float = typer.Option(1024.0),
    world_size: float = typer.Option(4096.0),
) -> None:
    """Convert a click inside the map container to world coordinates."""
    rect = fit_rect(container_width, container_height, image_width, image_height)
    if rect.is_empty:
        print({"error": "container has no area"})
        raise typer.Exit(code=1)
    point = Vec2(x, y)
    world_point = display_to_world(point, rect, world_size)
    print({"world": tuple(world_point), "on_map": contains_point(point, rect)})


if __name__ == "__main__":
    app()
