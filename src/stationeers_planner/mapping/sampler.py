"""Region lookup by sampling color-keyed region textures."""

from __future__ import annotations

from typing import Generic, Protocol, Sequence, TypeVar

from stationeers_planner.adapters.imaging import RasterBuffer
from stationeers_planner.models import Color, NamedRegion, OreRegion, Vec2, World


class ColorKeyed(Protocol):
    @property
    def color(self) -> Color: ...


RegionT = TypeVar("RegionT", bound=ColorKeyed)


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def world_to_pixel(point: Vec2, world_size: float, width: int, height: int) -> tuple[int, int]:
    """Nearest pixel for a world coordinate; out-of-world points clamp to the edge."""
    if world_size <= 0:
        raise ValueError(f"world_size must be positive, got {world_size}")
    half = world_size / 2
    u = _clamp01((point[0] + half) / world_size)
    v = _clamp01((point[1] + half) / world_size)
    return round(u * (width - 1)), round(v * (height - 1))


class RegionSampler(Generic[RegionT]):
    """Answers which region, if any, owns a world coordinate.

    A missing raster or an empty catalog is "no data" and always yields ``None``.
    No caching is done here.
    """

    def __init__(self, raster: RasterBuffer | None, world_size: float, catalog: Sequence[RegionT]) -> None:
        if world_size <= 0:
            raise ValueError(f"world_size must be positive, got {world_size}")
        self._raster = raster
        self._world_size = world_size
        self._catalog = tuple(catalog)

    @property
    def has_data(self) -> bool:
        return self._raster is not None and bool(self._catalog)

    def color_at(self, point: Vec2) -> Color | None:
        if self._raster is None:
            return None
        x, y = world_to_pixel(point, self._world_size, self._raster.width, self._raster.height)
        return self._raster.pixel(x, y)

    def region_at(self, point: Vec2) -> RegionT | None:
        if not self.has_data:
            return None
        color = self.color_at(point)
        for region in self._catalog:
            if region.color == color:
                return region
        return None


def ore_sampler(world: World) -> RegionSampler[OreRegion]:
    return RegionSampler(world.ore_texture, world.world_size, world.ore_regions)


def named_region_sampler(world: World) -> RegionSampler[NamedRegion]:
    return RegionSampler(world.named_regions_texture, world.world_size, world.named_regions)


def ore_at(world: World, point: Vec2) -> OreRegion | None:
    return ore_sampler(world).region_at(point)


def named_region_at(world: World, point: Vec2) -> NamedRegion | None:
    return named_region_sampler(world).region_at(point)
