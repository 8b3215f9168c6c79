from __future__ import annotations

import math

import pytest

from stationeers_planner.adapters import RasterBuffer
from stationeers_planner.mapping import build_ore_legend, describe_site, inspect_site, nearest_spawn
from stationeers_planner.models import Color, LegendEntry, NamedRegion, OreRegion, StartLocation, Vec2, World


def _world() -> World:
    return World(
        id="Mars2",
        display_name="Mars",
        start_locations=[
            StartLocation(id="A", position=Vec2(100, 0), display_name="Alpha"),
            StartLocation(id="B", position=Vec2(-100, 0), display_name="Bravo"),
        ],
        ore_regions=[
            OreRegion(id="Iron", color=Color(200, 50, 10), ore_type="Iron"),
            OreRegion(id="Ice", color=Color(0, 0, 255), ore_type="Ice"),
        ],
        named_regions=[NamedRegion(id="Basin", color=Color(1, 2, 3), display_name="Hellas Basin")],
        ore_texture=RasterBuffer.filled(2, 2, (200, 50, 10)),
    )


def test_nearest_spawn_prefers_first_on_ties() -> None:
    world = _world()

    spawn, distance = nearest_spawn(world, Vec2(0, 0))
    assert spawn.id == "A"
    assert distance == pytest.approx(100.0)

    spawn, distance = nearest_spawn(world, Vec2(-90, 0))
    assert spawn.id == "B"
    assert distance == pytest.approx(10.0)


def test_nearest_spawn_without_spawns() -> None:
    spawn, distance = nearest_spawn(World(id="Empty", display_name="Empty"), Vec2(0, 0))
    assert spawn is None
    assert math.isinf(distance)


def test_inspect_site_bundles_everything() -> None:
    report = inspect_site(_world(), (40, 30))

    assert report.position == Vec2(40, 30)
    assert report.on_world is True
    assert report.nearest_spawn.display_name == "Alpha"
    assert report.ore.ore_type == "Iron"
    assert report.named_region is None
    assert describe_site(report) == {
        "coordinates": "X: 40  Y: 30",
        "nearest_spawn": "Alpha (67m)",
        "ore_access": "Iron",
        "region": "--",
    }


def test_inspect_site_outside_world() -> None:
    report = inspect_site(_world(), Vec2(5000, 0))
    assert report.on_world is False


def test_legend_is_rebuilt_each_call() -> None:
    world = _world()
    legend = build_ore_legend(world)

    assert legend == [LegendEntry("Iron", Color(200, 50, 10)), LegendEntry("Ice", Color(0, 0, 255))]
    assert build_ore_legend(world) is not legend
    assert build_ore_legend(World(id="Lunar", display_name="Lunar")) == []
