from __future__ import annotations

from pathlib import Path

import pytest

from stationeers_planner.config import DEFAULT_NAME_PREFIXES, Settings


def test_settings_paths_derive_from_game_path(tmp_path: Path) -> None:
    settings = Settings(game_path=tmp_path)

    assert settings.assets_root == tmp_path / "rocketstation_Data" / "StreamingAssets"
    assert settings.worlds_root == settings.assets_root / "Worlds"
    assert settings.display_name_prefixes == list(DEFAULT_NAME_PREFIXES)


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STATIONEERS_PLANNER_GAME_PATH", str(tmp_path))
    monkeypatch.setenv("STATIONEERS_PLANNER_LOAD_WORKERS", "3")
    monkeypatch.setenv("STATIONEERS_PLANNER_WORLDS_SUBPATH", "MyWorlds")

    settings = Settings()

    assert settings.game_path == tmp_path
    assert settings.load_workers == 3
    assert settings.worlds_root.name == "MyWorlds"


def test_default_prefixes_are_not_shared_with_settings() -> None:
    settings = Settings()
    settings.display_name_prefixes.append("CustomSpawn")

    assert "CustomSpawn" not in DEFAULT_NAME_PREFIXES
    assert Settings().display_name_prefixes == list(DEFAULT_NAME_PREFIXES)
    assert isinstance(DEFAULT_NAME_PREFIXES, tuple)
