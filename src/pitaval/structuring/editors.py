"""Editor lookup for the volumes of "Der neue Pitaval".

Volumes 1–30 were edited by Häring (as Willibald Alexis) and Hitzig;
from volume 31 on the series was continued by Vollert.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pitaval.structuring.types import EditorRecord

__all__ = ["EDITORS", "LAST_FOUNDING_EDITORS_VOLUME", "select_editors"]

LAST_FOUNDING_EDITORS_VOLUME = 30

EDITORS: Mapping[str, EditorRecord] = MappingProxyType(
    {
        rec.surname: rec
        for rec in (
            EditorRecord("Hitzig", "Julius Eduard", "119209349"),
            EditorRecord("Häring", "Georg Wilhelm Heinrich", "118648071"),
            EditorRecord("Vollert", "Christian August Anton", "138687684"),
        )
    }
)


def select_editors(volume: int, table: Mapping[str, EditorRecord] = EDITORS) -> tuple[EditorRecord, ...]:
    """Return the editors of ``volume`` in the order they are listed."""
    if volume <= LAST_FOUNDING_EDITORS_VOLUME:
        return (table["Häring"], table["Hitzig"])
    return (table["Vollert"],)
