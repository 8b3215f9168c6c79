"""Letterboxed map display and display <-> world coordinate transforms.

The map image is scaled uniformly to fit inside its container and centred; the
spare space ends up on one axis only. Display coordinates have Y growing down,
world coordinates have Y growing north.
"""

from __future__ import annotations

from dataclasses import dataclass

from stationeers_planner.adapters.imaging import RasterBuffer
from stationeers_planner.models import Vec2


@dataclass(frozen=True, slots=True)
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height


EMPTY_RECT = Rect()


def fit_rect(container_width: float, container_height: float, image_width: float, image_height: float) -> Rect:
    """Largest centred rect with the image's aspect ratio inside the container.

    Returns an empty rect while the container (or image) has no area yet.
    """
    if container_width <= 0 or container_height <= 0 or image_width <= 0 or image_height <= 0:
        return EMPTY_RECT

    container_aspect = container_width / container_height
    image_aspect = image_width / image_height

    if image_aspect > container_aspect:
        width = container_width
        height = container_width / image_aspect
    else:
        height = container_height
        width = container_height * image_aspect

    return Rect((container_width - width) / 2, (container_height - height) / 2, width, height)


def _require_area(rect: Rect) -> None:
    if rect.is_empty:
        raise ValueError(f"cannot project through an empty rect: {rect}")


def display_to_world(point: Vec2, rect: Rect, world_size: float) -> Vec2:
    _require_area(rect)
    norm_x = (point[0] - rect.x) / rect.width
    norm_y = (point[1] - rect.y) / rect.height
    return Vec2((norm_x - 0.5) * world_size, (0.5 - norm_y) * world_size)


def world_to_display(point: Vec2, rect: Rect, world_size: float) -> Vec2:
    _require_area(rect)
    norm_x = point[0] / world_size + 0.5
    norm_y = 0.5 - point[1] / world_size
    return Vec2(rect.x + norm_x * rect.width, rect.y + norm_y * rect.height)


def contains_point(point: Vec2, rect: Rect) -> bool:
    """Half-open hit test: the left/top edges are inside, the right/bottom edges are not."""
    return rect.x <= point[0] < rect.x_max and rect.y <= point[1] < rect.y_max


class MapProjector:
    """Projection for one map image shown in a resizable container.

    Until both a map image and a non-empty container are known the projector is
    not ready: lookups return ``None`` and hit tests return ``False``.
    """

    def __init__(self, world_size: float, image: RasterBuffer | None = None) -> None:
        if world_size <= 0:
            raise ValueError(f"world_size must be positive, got {world_size}")
        self._world_size = world_size
        self._image = image
        self._container = (0.0, 0.0)
        self._rect = EMPTY_RECT

    @property
    def rect(self) -> Rect:
        return self._rect

    @property
    def ready(self) -> bool:
        return not self._rect.is_empty

    def resize(self, container_width: float, container_height: float) -> Rect:
        self._container = (container_width, container_height)
        self._rect = self._fit()
        return self._rect

    def set_image(self, image: RasterBuffer | None) -> Rect:
        self._image = image
        self._rect = self._fit()
        return self._rect

    def contains(self, point: Vec2) -> bool:
        return self.ready and contains_point(point, self._rect)

    def to_world(self, point: Vec2) -> Vec2 | None:
        if not self.ready:
            return None
        return display_to_world(point, self._rect, self._world_size)

    def to_display(self, point: Vec2) -> Vec2 | None:
        if not self.ready:
            return None
        return world_to_display(point, self._rect, self._world_size)

    def _fit(self) -> Rect:
        if self._image is None:
            return EMPTY_RECT
        return fit_rect(self._container[0], self._container[1], self._image.width, self._image.height)
