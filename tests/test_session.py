from __future__ import annotations

import pytest

from stationeers_planner.adapters import RasterBuffer
from stationeers_planner.mapping import MapProjector
from stationeers_planner.models import StartLocation, Vec2, World
from stationeers_planner.session import PlannerMode, PlannerSession


def _session() -> tuple[PlannerSession, MapProjector]:
    world = World(
        id="Mars2",
        display_name="Mars",
        start_locations=[StartLocation(id="A", position=Vec2(0, 0), display_name="Alpha")],
        minimap=RasterBuffer.filled(4, 4, (0, 0, 0)),
    )
    session = PlannerSession({"Mars2": world, "Lunar": World(id="Lunar", display_name="Lunar")})
    session.select_world("Mars2")
    projector = MapProjector(world.world_size, world.minimap)
    projector.resize(800, 400)
    return session, projector


def test_clicks_in_margin_are_ignored() -> None:
    session, projector = _session()

    assert session.select_location(Vec2(100, 200), projector) is None
    assert session.state.selected_location is None
    assert session.confirm() is False
    assert session.state.mode == PlannerMode.MAP


def test_select_and_confirm_enters_build_mode() -> None:
    session, projector = _session()
    seen: list[tuple[str, PlannerMode]] = []
    session.on_mode_changed(lambda mode: seen.append(("first", mode)))
    session.on_mode_changed(lambda mode: seen.append(("second", mode)))

    report = session.select_location(Vec2(400, 200), projector)
    assert report is not None
    assert session.state.selected_location == pytest.approx((0.0, 0.0))
    assert report.nearest_spawn.display_name == "Alpha"

    assert session.confirm() is True
    assert session.state.mode == PlannerMode.BUILD
    assert session.confirm() is True
    assert seen == [("first", PlannerMode.BUILD), ("second", PlannerMode.BUILD)]

    assert session.toggle_mode() == PlannerMode.MAP
    assert seen[-1] == ("second", PlannerMode.MAP)


def test_switching_world_clears_selection() -> None:
    session, projector = _session()
    session.select_location(Vec2(400, 200), projector)

    session.select_world("Lunar")

    assert session.world.id == "Lunar"
    assert session.state.selected_location is None
    assert session.state.site is None
    assert session.world_ids == ["Mars2", "Lunar"]


def test_unknown_world_rejected() -> None:
    session, _ = _session()
    with pytest.raises(KeyError):
        session.select_world("Titan")


def test_projector_not_ready_means_no_selection() -> None:
    session, projector = _session()
    projector.resize(0, 0)
    assert session.select_location(Vec2(400, 200), projector) is None


def test_enter_map_mode_without_change_is_silent() -> None:
    session, _ = _session()
    seen: list[PlannerMode] = []
    session.on_mode_changed(seen.append)

    session.enter_map_mode()

    assert seen == []
