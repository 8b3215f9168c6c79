"""Fallback display names derived from game identifiers.

Used whenever a localization key is missing or the localizer has no entry for
it. Not a substitute for real localization.
"""

from __future__ import annotations

from typing import Sequence

from stationeers_planner.config import DEFAULT_NAME_PREFIXES

ORE_TYPE_MARKERS = ("DeepMiningRegion", "DeepMinerRegion")


def humanize_identifier(identifier: str | None, prefixes: Sequence[str] = DEFAULT_NAME_PREFIXES) -> str | None:
    """Turn ``"MarsSpawnCanyonOverlook"`` into ``"Canyon Overlook"``.

    The first prefix in ``prefixes`` that the identifier starts with is removed,
    then a space is inserted before every uppercase letter that follows a
    non-uppercase, non-space character.
    """
    if not identifier:
        return identifier

    name = identifier
    for prefix in prefixes:
        if prefix and name.startswith(prefix):
            name = name[len(prefix) :]
            break

    chars: list[str] = []
    for index, char in enumerate(name):
        previous = name[index - 1] if index else ""
        if index and char.isupper() and not previous.isupper() and not previous.isspace():
            chars.append(" ")
        chars.append(char)
    return "".join(chars).strip()


def parse_ore_type(region_id: str) -> str:
    """``"MarsDeepMiningRegionIron"`` -> ``"Iron"``; identifiers without a marker pass through."""
    for marker in ORE_TYPE_MARKERS:
        index = region_id.find(marker)
        if index >= 0:
            return region_id[index + len(marker) :]
    return region_id
