"""Vertical floor layers for navigating a multi-storey build."""

from __future__ import annotations

import logging
from typing import Callable

from stationeers_planner.grid.snapping import floor_index, floor_y

FloorObserver = Callable[[int], None]
VisibilityObserver = Callable[[int, bool], None]


class FloorNavigator:
    """Tracks the active floor and per-floor visibility within a fixed range.

    Observers are called synchronously, in registration order, and only when a
    value actually changes.
    """

    def __init__(
        self,
        *,
        min_floor: int = -5,
        max_floor: int = 10,
        current_floor: int = 0,
        logger: logging.Logger | None = None,
    ) -> None:
        if min_floor > max_floor:
            raise ValueError(f"min_floor {min_floor} is above max_floor {max_floor}")
        self._min_floor = min_floor
        self._max_floor = max_floor
        self._current = self._clamp(current_floor)
        self._visibility = {floor: True for floor in range(min_floor, max_floor + 1)}
        self._floor_observers: list[FloorObserver] = []
        self._visibility_observers: list[VisibilityObserver] = []
        self._logger = logger or logging.getLogger("stationeers_planner.grid.floors")

    @property
    def current_floor(self) -> int:
        return self._current

    @property
    def current_floor_y(self) -> float:
        return floor_y(self._current)

    @property
    def min_floor(self) -> int:
        return self._min_floor

    @property
    def max_floor(self) -> int:
        return self._max_floor

    def on_floor_changed(self, observer: FloorObserver) -> None:
        self._floor_observers.append(observer)

    def on_visibility_changed(self, observer: VisibilityObserver) -> None:
        self._visibility_observers.append(observer)

    def set_floor(self, floor: int) -> int:
        floor = self._clamp(floor)
        if floor != self._current:
            self._current = floor
            self._logger.debug("floor_changed", extra={"floor": floor, "y": self.current_floor_y})
            for observer in list(self._floor_observers):
                observer(floor)
        return self._current

    def floor_up(self) -> int:
        return self.set_floor(self._current + 1)

    def floor_down(self) -> int:
        return self.set_floor(self._current - 1)

    def set_floor_visibility(self, floor: int, visible: bool) -> None:
        if floor not in self._visibility or self._visibility[floor] == visible:
            return
        self._visibility[floor] = visible
        for observer in list(self._visibility_observers):
            observer(floor, visible)

    def is_floor_visible(self, floor: int) -> bool:
        return self._visibility.get(floor, False)

    def floor_for_y(self, y: float) -> int:
        return floor_index(y)

    def _clamp(self, floor: int) -> int:
        return max(self._min_floor, min(self._max_floor, floor))
