"""Title and citation derivation."""

from __future__ import annotations

import re
from collections.abc import Sequence

from pitaval.errors import InvalidInputError

__all__ = ["extract_title", "build_citation", "CITATION_TEMPLATE"]

CITATION_TEMPLATE = "{title} In: Der neue Pitaval, Bd. {volume}. Leipzig, {year}."

_WS_RUN_RE = re.compile(r"\s+")


def extract_title(blocks: Sequence[str]) -> str:
    """Build the work title from the leading blocks.

    Blocks are concatenated as-is (no separator) up to and including the
    first one ending in a period. Without such a block every block is
    consumed. Line breaks become spaces and whitespace runs collapse to a
    single space.

    Args:
        blocks: Ordered text blocks of one document. Not modified.

    Returns:
        The title string; it never contains a newline.

    Raises:
        InvalidInputError: If ``blocks`` is empty.
    """
    if not blocks:
        raise InvalidInputError("cannot extract a title from an empty text")

    parts: list[str] = []
    for block in blocks:
        parts.append(block)
        if block.endswith("."):
            break

    title = "".join(parts).replace("\n", " ")
    return _WS_RUN_RE.sub(" ", title)


def build_citation(title: str, volume: int, year: int) -> str:
    """Return the bibliographic citation of a narrative in the printed series."""
    if not title.endswith("."):
        title += "."
    return CITATION_TEMPLATE.format(title=title, volume=volume, year=year)
