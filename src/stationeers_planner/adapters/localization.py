"""Boundary for resolving localization keys to display text."""

from __future__ import annotations

from typing import Mapping, Protocol


class Localizer(Protocol):
    """Looks up translated text for a localization key."""

    def resolve(self, key: str) -> str | None:
        """Return the text for ``key``, or ``None`` when it is unknown."""


class MappingLocalizer:
    """Localizer backed by an in-memory key/text table."""

    def __init__(self, table: Mapping[str, str]) -> None:
        self._table = dict(table)

    def resolve(self, key: str) -> str | None:
        return self._table.get(key)
