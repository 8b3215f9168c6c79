"""Runtime configuration for the Stationeers planner."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NAME_PREFIXES = (
    "MarsSpawn",
    "LunarSpawn",
    "EuropaSpawn",
    "VulcanSpawn",
    "VenusSpawn",
    "MimasSpawn",
    "MarsNamedRegion",
    "LunarNamedRegion",
    "GeoRegion",
)


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="STATIONEERS_PLANNER_", env_file=".env", extra="ignore")

    app_name: str = "stationeers-planner"
    log_level: str = "INFO"
    game_path: Path = Field(
        default=Path(r"C:\Program Files (x86)\Steam\steamapps\common\Stationeers"),
        description="Stationeers installation root.",
    )
    streaming_assets_subpath: str = Field(
        default="rocketstation_Data/StreamingAssets",
        description="Data root that texture paths in world definitions are relative to.",
    )
    worlds_subpath: str = Field(
        default="Worlds",
        description="Folder under the data root holding one folder per world.",
    )
    load_workers: int = Field(default=1, ge=1, description="Worker threads used by the batch world load.")
    display_name_prefixes: list[str] = Field(default_factory=lambda: list(DEFAULT_NAME_PREFIXES))

    @property
    def assets_root(self) -> Path:
        return self.game_path / self.streaming_assets_subpath

    @property
    def worlds_root(self) -> Path:
        return self.assets_root / self.worlds_subpath


settings = Settings()
