"""Worlds shipped with the game, in menu order."""

from __future__ import annotations

from stationeers_planner.models import WorldCatalogEntry

WORLD_CATALOG: tuple[WorldCatalogEntry, ...] = (
    WorldCatalogEntry(folder="Lunar", definition_file="Lunar.xml", display_name="Lunar"),
    WorldCatalogEntry(folder="Europa", definition_file="Europa.xml", display_name="Europa"),
    WorldCatalogEntry(folder="Mars2", definition_file="Mars2.xml", display_name="Mars"),
    WorldCatalogEntry(folder="Mimas", definition_file="MimasHerschel.xml", display_name="Mimas"),
    WorldCatalogEntry(folder="Venus", definition_file="Venus.xml", display_name="Venus"),
    WorldCatalogEntry(folder="Vulcan", definition_file="Vulcan.xml", display_name="Vulcan"),
)


def find_catalog_entry(key: str) -> WorldCatalogEntry | None:
    """Look up an entry by folder or display name, case-insensitively."""
    wanted = key.casefold()
    for entry in WORLD_CATALOG:
        if wanted in (entry.folder.casefold(), entry.display_name.casefold()):
            return entry
    return None
