"""World definition catalog, parsing and loading."""

from .catalog import WORLD_CATALOG, find_catalog_entry
from .loader import WorldLoader
from .naming import humanize_identifier, parse_ore_type
from .parser import WorldDefinitionParser, WorldParseError, parse_world_definition

__all__ = [
    "WORLD_CATALOG",
    "WorldDefinitionParser",
    "WorldLoader",
    "WorldParseError",
    "find_catalog_entry",
    "humanize_identifier",
    "parse_ore_type",
    "parse_world_definition",
]
