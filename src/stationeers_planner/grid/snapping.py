"""Grid snapping and fixed-point conversions matching the game's placement grid.

Main grid: 2.0 m cells for frames and structures.
Small grid: 0.5 m cells offset by 0.25 m for pipes, cables and small devices.
The micro-grid stores positions as integers at 0.1 m resolution.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from stationeers_planner.models import Vec3

MICRO_GRID_INVERSE_SCALE = 10
FLOOR_HEIGHT = 2.0


@dataclass(frozen=True, slots=True)
class GridSpec:
    cell_size: float
    offset: float = 0.0

    @property
    def center_offset(self) -> float:
        return self.offset + self.cell_size / 2


MAIN_GRID = GridSpec(cell_size=2.0, offset=0.0)
SMALL_GRID = GridSpec(cell_size=0.5, offset=0.25)
GRIDS = {"main": MAIN_GRID, "small": SMALL_GRID}


class MicroGridPoint(NamedTuple):
    x: int
    y: int
    z: int


def snap_axis(value: float, cell_size: float, offset: float = 0.0) -> float:
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    center = offset + cell_size / 2
    return round((value - center) / cell_size) * cell_size + center


def snap_to_grid(point: Vec3, cell_size: float, offset: float = 0.0) -> Vec3:
    """Snap every axis to the nearest cell centre of the given grid."""
    return Vec3(*(snap_axis(v, cell_size, offset) for v in point))


def snap_to_main_grid(point: Vec3) -> Vec3:
    return snap_to_grid(point, MAIN_GRID.cell_size, MAIN_GRID.offset)


def snap_to_small_grid(point: Vec3) -> Vec3:
    return snap_to_grid(point, SMALL_GRID.cell_size, SMALL_GRID.offset)


def to_micro_grid(point: Vec3) -> MicroGridPoint:
    return MicroGridPoint(*(round(v * MICRO_GRID_INVERSE_SCALE) for v in point))


def from_micro_grid(point: MicroGridPoint) -> Vec3:
    return Vec3(*(v / MICRO_GRID_INVERSE_SCALE for v in point))


def floor_index(y: float) -> int:
    """Floor 0 spans y in [0, 2), floor 1 spans [2, 4), floor -1 spans [-2, 0)."""
    return math.floor(y / FLOOR_HEIGHT)


def floor_y(index: int) -> float:
    return index * FLOOR_HEIGHT


def snap_to_floor(y: float) -> float:
    return floor_y(floor_index(y))


def snap_placement(point: Vec3, grid: GridSpec = MAIN_GRID) -> Vec3:
    """Snap a picked build site: x/z to ``grid`` cell centres, y down to its floor level."""
    return Vec3(
        snap_axis(point.x, grid.cell_size, grid.offset),
        snap_to_floor(point.y),
        snap_axis(point.z, grid.cell_size, grid.offset),
    )


def rotate_quarter(turns: int, delta: int = 1) -> int:
    """Advance a quarter-turn rotation counter, normalized to 0..3."""
    return (turns + delta) % 4
