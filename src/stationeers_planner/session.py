"""Planner session: which world is open, where the user picked, and which mode is active."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from stationeers_planner.mapping.projector import MapProjector
from stationeers_planner.mapping.site import inspect_site
from stationeers_planner.models import SiteReport, Vec2, World


class PlannerMode(str, Enum):
    MAP = "map"
    BUILD = "build"


ModeObserver = Callable[[PlannerMode], None]


@dataclass(slots=True)
class PlannerState:
    mode: PlannerMode = PlannerMode.MAP
    world_id: str | None = None
    selected_location: Vec2 | None = None
    site: SiteReport | None = None


class PlannerSession:
    """Coordinates map-mode site selection and the switch into build mode.

    Mode observers run synchronously in registration order, once per actual change.
    """

    def __init__(self, worlds: Mapping[str, World], *, logger: logging.Logger | None = None) -> None:
        self._worlds = dict(worlds)
        self._state = PlannerState()
        self._observers: list[ModeObserver] = []
        self._logger = logger or logging.getLogger("stationeers_planner.session")

    @property
    def state(self) -> PlannerState:
        return self._state

    @property
    def world(self) -> World | None:
        if self._state.world_id is None:
            return None
        return self._worlds[self._state.world_id]

    @property
    def world_ids(self) -> list[str]:
        return list(self._worlds)

    def on_mode_changed(self, observer: ModeObserver) -> None:
        self._observers.append(observer)

    def select_world(self, world_id: str) -> World:
        if world_id not in self._worlds:
            raise KeyError(f"Unknown world: {world_id}")
        if world_id != self._state.world_id:
            self._state.world_id = world_id
            self._state.selected_location = None
            self._state.site = None
        return self._worlds[world_id]

    def select_location(self, local_point: Vec2, projector: MapProjector) -> SiteReport | None:
        """Pick a site from a display-local click; clicks in the margin are ignored."""
        world = self.world
        if world is None or not projector.contains(local_point):
            return None

        location = projector.to_world(local_point)
        if location is None:
            return None
        self._state.selected_location = location
        self._state.site = inspect_site(world, location)
        return self._state.site

    def confirm(self) -> bool:
        if self._state.selected_location is None:
            return False
        self._logger.info(
            "location_confirmed",
            extra={"world_id": self._state.world_id, "location": tuple(self._state.selected_location)},
        )
        self._set_mode(PlannerMode.BUILD)
        return True

    def enter_map_mode(self) -> None:
        self._set_mode(PlannerMode.MAP)

    def toggle_mode(self) -> PlannerMode:
        self._set_mode(PlannerMode.BUILD if self._state.mode == PlannerMode.MAP else PlannerMode.MAP)
        return self._state.mode

    def _set_mode(self, mode: PlannerMode) -> None:
        if mode == self._state.mode:
            return
        previous = self._state.mode
        self._state.mode = mode
        self._logger.info("mode_changed", extra={"from_mode": previous.value, "to_mode": mode.value})
        for observer in list(self._observers):
            observer(mode)
