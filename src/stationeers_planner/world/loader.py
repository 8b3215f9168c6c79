"""Loads world definitions and their textures from a game installation."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import Iterable, Sequence

from stationeers_planner.adapters.filesystem import FileReader, LocalFileReader
from stationeers_planner.adapters.imaging import ImageDecodeError, ImageDecoder, PillowImageDecoder, RasterBuffer
from stationeers_planner.adapters.localization import Localizer
from stationeers_planner.config import DEFAULT_NAME_PREFIXES, Settings
from stationeers_planner.models import World, WorldCatalogEntry
from stationeers_planner.world.catalog import WORLD_CATALOG
from stationeers_planner.world.parser import WorldDefinitionParser, WorldParseError


class WorldLoader:
    """Reads world definitions under ``worlds_root`` and textures under ``assets_root``.

    Every call builds new World instances; nothing is cached or shared between calls,
    so ``load_all_worlds`` can fan out across threads.
    """

    def __init__(
        self,
        *,
        worlds_root: str | Path,
        assets_root: str | Path,
        file_reader: FileReader | None = None,
        image_decoder: ImageDecoder | None = None,
        localizer: Localizer | None = None,
        name_prefixes: Sequence[str] = DEFAULT_NAME_PREFIXES,
        logger: logging.Logger | None = None,
    ) -> None:
        self._worlds_root = Path(worlds_root)
        self._assets_root = Path(assets_root)
        self._file_reader = file_reader or LocalFileReader()
        self._image_decoder = image_decoder or PillowImageDecoder()
        self._logger = logger or logging.getLogger("stationeers_planner.world.loader")
        self._parser = WorldDefinitionParser(localizer=localizer, name_prefixes=name_prefixes, logger=self._logger)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> WorldLoader:
        kwargs.setdefault("name_prefixes", settings.display_name_prefixes)
        return cls(worlds_root=settings.worlds_root, assets_root=settings.assets_root, **kwargs)

    def definition_path(self, entry: WorldCatalogEntry) -> Path:
        return self._worlds_root / entry.folder / entry.definition_file

    def resolve_asset(self, relative_path: str) -> Path:
        """Map a texture path from a world definition onto the assets root."""
        normalized = PurePosixPath(relative_path.replace("\\", "/"))
        return self._assets_root.joinpath(*normalized.parts)

    def load_world(self, entry: WorldCatalogEntry, *, with_textures: bool = True) -> World:
        """Parse one world and attach whichever of its textures can be decoded.

        Raises ``WorldParseError`` when the definition is unreadable, malformed or
        has no ``World`` element.
        """
        path = self.definition_path(entry)
        try:
            data = self._file_reader.read_bytes(path)
        except OSError as exc:
            raise WorldParseError(str(path), f"unable to read world definition: {exc}") from exc

        world = self._parser.parse(data, entry, source=str(path))
        if with_textures:
            world.minimap = self.load_texture(world.minimap_path)
            world.ore_texture = self.load_texture(world.ore_texture_path)
            world.named_regions_texture = self.load_texture(world.named_regions_texture_path)
        return world

    def load_texture(self, relative_path: str | None) -> RasterBuffer | None:
        if not relative_path:
            return None

        path = self.resolve_asset(relative_path)
        try:
            data = self._file_reader.read_bytes(path)
        except OSError:
            self._logger.warning("texture_not_found", extra={"path": str(path)})
            return None

        try:
            return self._image_decoder.decode(data)
        except ImageDecodeError as exc:
            self._logger.warning("texture_decode_failed", extra={"path": str(path), "error": str(exc)})
            return None

    def load_all_worlds(
        self,
        catalog: Iterable[WorldCatalogEntry] = WORLD_CATALOG,
        *,
        max_workers: int = 1,
        with_textures: bool = True,
    ) -> dict[str, World]:
        """Load every catalog entry, keyed by folder, skipping the ones that fail."""
        entries = list(catalog)

        def _attempt(entry: WorldCatalogEntry) -> World | None:
            try:
                return self.load_world(entry, with_textures=with_textures)
            except WorldParseError as exc:
                self._logger.error(
                    "world_load_failed",
                    extra={"folder": entry.folder, "source": exc.source, "error": exc.message},
                )
                return None

        if max_workers > 1 and len(entries) > 1:
            with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="world-loader") as pool:
                results = list(pool.map(_attempt, entries))
        else:
            results = [_attempt(entry) for entry in entries]

        worlds: dict[str, World] = {}
        for entry, world in zip(entries, results):
            if world is None:
                continue
            worlds[entry.folder] = world
            self._logger.info(
                "world_loaded",
                extra={
                    "folder": entry.folder,
                    "start_locations": len(world.start_locations),
                    "ore_regions": len(world.ore_regions),
                },
            )
        return worlds
