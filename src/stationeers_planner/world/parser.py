"""Parser for Stationeers world definition XML.

Expected shape (only the parts that are read)::

    <World Id="Mars2">
      <Gravity>-3.71</Gravity>
      <TerrainSettings WorldSize="4096">
        <MiniMap Path="Worlds/Mars2/Mars2Minimap.png" />
      </TerrainSettings>
      <StartLocation Id="MarsSpawnCanyonOverlook">
        <Name Key="..." /> <Description Key="..." />
        <Position x="-1048" y="522" /> <SpawnRadius Value="10" />
      </StartLocation>
      <RegionSet Id="MarsDeepMiningRegions">
        <Texture Path="Worlds/Mars2/DeepMining.png" />
        <Region Id="MarsDeepMiningRegionIron" R="200" G="50" B="10" />
      </RegionSet>
      <RegionSet Id="MarsNamedRegions">
        <Texture Path="Worlds/Mars2/NamedRegions.png" />
        <Region Id="MarsNamedRegionButchersFlat" R="1" G="2" B="3"><Name Key="..." /></Region>
      </RegionSet>
    </World>

Every field except the ``World`` element itself is optional and falls back to a
default.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Sequence

from stationeers_planner.adapters.localization import Localizer
from stationeers_planner.config import DEFAULT_NAME_PREFIXES
from stationeers_planner.models import (
    DEFAULT_WORLD_SIZE,
    Color,
    NamedRegion,
    OreRegion,
    StartLocation,
    Vec2,
    World,
    WorldCatalogEntry,
)
from stationeers_planner.world.naming import humanize_identifier, parse_ore_type

DEEP_MINING_MARKER = "DeepMining"
NAMED_REGIONS_MARKER = "NamedRegions"


class WorldParseError(Exception):
    """A world definition could not be turned into a World."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


def _parse_float(text: str | None, default: float = 0.0) -> float:
    if text is None:
        return default
    try:
        return float(text.strip())
    except ValueError:
        return default


def _parse_int(text: str | None) -> int | None:
    if text is None:
        return None
    try:
        return int(text.strip())
    except ValueError:
        return None


def _parse_byte(text: str | None) -> int:
    value = _parse_int(text)
    if value is None or not 0 <= value <= 255:
        return 0
    return value


def _child_attr(element: ET.Element, child: str, attr: str) -> str | None:
    node = element.find(child)
    if node is None:
        return None
    return node.get(attr)


def _read_color(element: ET.Element) -> Color:
    return Color(_parse_byte(element.get("R")), _parse_byte(element.get("G")), _parse_byte(element.get("B")))


class WorldDefinitionParser:
    """Builds a fresh World from one definition document per call."""

    def __init__(
        self,
        *,
        localizer: Localizer | None = None,
        name_prefixes: Sequence[str] = DEFAULT_NAME_PREFIXES,
        logger: logging.Logger | None = None,
    ) -> None:
        self._localizer = localizer
        self._name_prefixes = tuple(name_prefixes)
        self._logger = logger or logging.getLogger("stationeers_planner.world.parser")

    def parse(self, data: bytes, entry: WorldCatalogEntry, *, source: str | None = None) -> World:
        source = source or entry.definition_file
        try:
            root = ET.fromstring(data)
        except (ET.ParseError, LookupError, ValueError) as exc:
            raise WorldParseError(source, f"malformed world definition: {exc}") from exc

        world_node = next(root.iter("World"), None)
        if world_node is None:
            raise WorldParseError(source, "no <World> element found")

        world = World(id=world_node.get("Id") or entry.folder, display_name=entry.display_name)

        gravity_node = world_node.find("Gravity")
        if gravity_node is not None:
            world.gravity = _parse_float(gravity_node.text)

        self._parse_terrain(world_node, world, source)
        world.start_locations = [self._parse_start_location(node) for node in world_node.findall("StartLocation")]
        self._parse_region_sets(world_node, world)

        self._logger.debug(
            "world_parsed",
            extra={
                "source": source,
                "world_id": world.id,
                "start_locations": len(world.start_locations),
                "ore_regions": len(world.ore_regions),
                "named_regions": len(world.named_regions),
            },
        )
        return world

    def resolve_name(self, key: str | None, identifier: str | None) -> str:
        if key and self._localizer is not None:
            text = self._localizer.resolve(key)
            if text:
                return text
        return humanize_identifier(identifier, self._name_prefixes) or ""

    def _parse_terrain(self, world_node: ET.Element, world: World, source: str) -> None:
        terrain = world_node.find("TerrainSettings")
        if terrain is None:
            return

        raw_size = terrain.get("WorldSize")
        if raw_size is not None:
            size = _parse_int(raw_size)
            if size is not None and size > 0 and size % 2 == 0:
                world.world_size = size
            else:
                self._logger.warning(
                    "invalid_world_size",
                    extra={"source": source, "value": raw_size, "fallback": DEFAULT_WORLD_SIZE},
                )

        world.minimap_path = _child_attr(terrain, "MiniMap", "Path")

    def _parse_start_location(self, node: ET.Element) -> StartLocation:
        location_id = node.get("Id") or ""
        name_key = _child_attr(node, "Name", "Key")

        position = Vec2(0.0, 0.0)
        position_node = node.find("Position")
        if position_node is not None:
            position = Vec2(_parse_float(position_node.get("x")), _parse_float(position_node.get("y")))

        return StartLocation(
            id=location_id,
            name_key=name_key,
            description_key=_child_attr(node, "Description", "Key"),
            position=position,
            spawn_radius=max(0.0, _parse_float(_child_attr(node, "SpawnRadius", "Value"))),
            display_name=self.resolve_name(name_key, location_id),
        )

    def _parse_region_sets(self, world_node: ET.Element, world: World) -> None:
        ore_regions: list[OreRegion] = []
        named_regions: list[NamedRegion] = []

        for region_set in world_node.findall("RegionSet"):
            set_id = region_set.get("Id")
            if not set_id:
                continue
            texture_path = _child_attr(region_set, "Texture", "Path")

            if DEEP_MINING_MARKER in set_id:
                if world.ore_texture_path is None:
                    world.ore_texture_path = texture_path
                for node in region_set.findall("Region"):
                    region_id = node.get("Id") or ""
                    color = _read_color(node)
                    if color.is_placeholder:
                        continue
                    ore_regions.append(OreRegion(id=region_id, color=color, ore_type=parse_ore_type(region_id)))

            if NAMED_REGIONS_MARKER in set_id:
                if world.named_regions_texture_path is None:
                    world.named_regions_texture_path = texture_path
                for node in region_set.findall("Region"):
                    region_id = node.get("Id") or ""
                    color = _read_color(node)
                    if color.is_placeholder:
                        continue
                    name_key = _child_attr(node, "Name", "Key") or node.get("Key")
                    named_regions.append(
                        NamedRegion(
                            id=region_id,
                            color=color,
                            name_key=name_key,
                            display_name=self.resolve_name(name_key, region_id),
                        )
                    )

        world.ore_regions = ore_regions
        world.named_regions = named_regions


def parse_world_definition(data: bytes, entry: WorldCatalogEntry, *, source: str | None = None) -> World:
    """Parse with default naming rules and no localizer."""
    return WorldDefinitionParser().parse(data, entry, source=source)
