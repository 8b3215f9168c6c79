"""Build-site inspection: what the map panel shows for a picked location."""

from __future__ import annotations

import math

from stationeers_planner.mapping.sampler import named_region_at, ore_at
from stationeers_planner.models import LegendEntry, SiteReport, StartLocation, Vec2, World


def nearest_spawn(world: World, point: Vec2) -> tuple[StartLocation | None, float]:
    """Closest start location and its distance; ``(None, inf)`` when the world has none."""
    best: StartLocation | None = None
    best_distance = math.inf
    for location in world.start_locations:
        distance = math.dist(point, location.position)
        if distance < best_distance:
            best, best_distance = location, distance
    return best, best_distance


def inspect_site(world: World, point: Vec2) -> SiteReport:
    point = Vec2(*point)
    spawn, distance = nearest_spawn(world, point)
    return SiteReport(
        position=point,
        on_world=world.contains(point),
        nearest_spawn=spawn,
        spawn_distance=distance,
        ore=ore_at(world, point),
        named_region=named_region_at(world, point),
    )


def build_ore_legend(world: World) -> list[LegendEntry]:
    """A new legend list per call, in document order."""
    return [LegendEntry(label=region.ore_type, color=region.color) for region in world.ore_regions]


def describe_site(report: SiteReport) -> dict[str, str]:
    spawn = "--"
    if report.nearest_spawn is not None:
        spawn = f"{report.nearest_spawn.display_name} ({report.spawn_distance:.0f}m)"
    return {
        "coordinates": f"X: {report.position.x:.0f}  Y: {report.position.y:.0f}",
        "nearest_spawn": spawn,
        "ore_access": report.ore.ore_type if report.ore else "None detected",
        "region": report.named_region.display_name if report.named_region else "--",
    }
