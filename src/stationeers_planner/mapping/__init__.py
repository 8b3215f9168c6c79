"""Map projection, region sampling and site inspection."""

from .projector import EMPTY_RECT, MapProjector, Rect, contains_point, display_to_world, fit_rect, world_to_display
from .sampler import RegionSampler, named_region_at, named_region_sampler, ore_at, ore_sampler, world_to_pixel
from .site import build_ore_legend, describe_site, inspect_site, nearest_spawn

__all__ = [
    "EMPTY_RECT",
    "MapProjector",
    "Rect",
    "RegionSampler",
    "build_ore_legend",
    "contains_point",
    "describe_site",
    "display_to_world",
    "fit_rect",
    "inspect_site",
    "named_region_at",
    "named_region_sampler",
    "nearest_spawn",
    "ore_at",
    "ore_sampler",
    "world_to_display",
    "world_to_pixel",
]
