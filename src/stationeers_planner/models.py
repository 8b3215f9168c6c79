"""World data model parsed from Stationeers world definition files.

Coordinates are game coordinates: a square of edge ``world_size`` centred on the
origin, +X east and +Y north.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from stationeers_planner.adapters.imaging import RasterBuffer

DEFAULT_WORLD_SIZE = 4096


class Vec2(NamedTuple):
    x: float
    y: float


class Vec3(NamedTuple):
    x: float
    y: float
    z: float


class Color(NamedTuple):
    """An exact 8-bit RGB key as written in region textures."""

    r: int
    g: int
    b: int

    @property
    def is_placeholder(self) -> bool:
        """Pure black marks reference-only region entries with no texture footprint."""
        return self.r == 0 and self.g == 0 and self.b == 0

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(slots=True)
class StartLocation:
    id: str
    name_key: str | None = None
    description_key: str | None = None
    position: Vec2 = Vec2(0.0, 0.0)
    spawn_radius: float = 0.0
    display_name: str = ""


@dataclass(slots=True)
class OreRegion:
    id: str
    color: Color
    ore_type: str


@dataclass(slots=True)
class NamedRegion:
    id: str
    color: Color
    name_key: str | None = None
    display_name: str = ""


@dataclass(slots=True)
class World:
    """One planet or moon as declared by its world definition."""

    id: str
    display_name: str
    world_size: int = DEFAULT_WORLD_SIZE
    gravity: float = 0.0
    start_locations: list[StartLocation] = field(default_factory=list)
    ore_regions: list[OreRegion] = field(default_factory=list)
    named_regions: list[NamedRegion] = field(default_factory=list)

    # Texture paths, relative to the game's streaming assets folder.
    minimap_path: str | None = None
    ore_texture_path: str | None = None
    named_regions_texture_path: str | None = None

    # Decoded textures, attached by the loader; None when absent or unreadable.
    minimap: RasterBuffer | None = None
    ore_texture: RasterBuffer | None = None
    named_regions_texture: RasterBuffer | None = None

    @property
    def half_size(self) -> float:
        return self.world_size / 2

    @property
    def coordinate_min(self) -> Vec2:
        return Vec2(-self.half_size, -self.half_size)

    @property
    def coordinate_max(self) -> Vec2:
        return Vec2(self.half_size, self.half_size)

    def contains(self, point: Vec2) -> bool:
        half = self.half_size
        return -half <= point[0] <= half and -half <= point[1] <= half


@dataclass(frozen=True, slots=True)
class WorldCatalogEntry:
    """Registry row pointing at one world's definition file."""

    folder: str
    definition_file: str
    display_name: str


@dataclass(frozen=True, slots=True)
class LegendEntry:
    label: str
    color: Color


@dataclass(slots=True)
class SiteReport:
    """Everything known about one picked point on a world map."""

    position: Vec2
    on_world: bool
    nearest_spawn: StartLocation | None
    spawn_distance: float
    ore: OreRegion | None
    named_region: NamedRegion | None
