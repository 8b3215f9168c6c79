"""Placement grid math and floor layers."""

from .floors import FloorNavigator
from .snapping import (
    FLOOR_HEIGHT,
    GRIDS,
    MAIN_GRID,
    MICRO_GRID_INVERSE_SCALE,
    SMALL_GRID,
    GridSpec,
    MicroGridPoint,
    floor_index,
    floor_y,
    from_micro_grid,
    rotate_quarter,
    snap_placement,
    snap_to_floor,
    snap_to_grid,
    snap_to_main_grid,
    snap_to_small_grid,
    to_micro_grid,
)

__all__ = [
    "FLOOR_HEIGHT",
    "GRIDS",
    "MAIN_GRID",
    "MICRO_GRID_INVERSE_SCALE",
    "SMALL_GRID",
    "FloorNavigator",
    "GridSpec",
    "MicroGridPoint",
    "floor_index",
    "floor_y",
    "from_micro_grid",
    "rotate_quarter",
    "snap_placement",
    "snap_to_floor",
    "snap_to_grid",
    "snap_to_main_grid",
    "snap_to_small_grid",
    "to_micro_grid",
]
