"""Filename conventions of the Pitaval transcriptions.

Input stems look like ``Bd05_1845_02`` (volume, publication year, running
number within the volume), optionally followed by free text. Output names
are reduced to a filesystem-safe ASCII subset.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["FilenameInfo", "parse_filename", "output_filename", "MAX_STEM_LENGTH"]

_STEM_RE = re.compile(r"^Bd(\d+)_(\d{4})_(\d+)")
_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]")

MAX_STEM_LENGTH = 100


@dataclass(frozen=True, slots=True)
class FilenameInfo:
    volume: int
    year: int
    sequence: int


def parse_filename(stem: str) -> FilenameInfo | None:
    """Extract volume, year and sequence number from ``stem``.

    Only the prefix has to match; anything after the sequence number is
    ignored. Returns ``None`` when the stem does not follow the pattern.
    """
    m = _STEM_RE.match(stem)
    if m is None:
        return None
    vol, year, no = m.groups()
    return FilenameInfo(volume=int(vol), year=int(year), sequence=int(no))


def output_filename(stem: str, suffix: str = ".xml") -> str:
    """Return the normalized output filename for ``stem``.

    Characters outside ``[A-Za-z0-9_-]`` become ``_`` and the result is cut
    to :data:`MAX_STEM_LENGTH` characters before ``suffix`` is appended.
    """
    return _UNSAFE_RE.sub("_", stem)[:MAX_STEM_LENGTH] + suffix
