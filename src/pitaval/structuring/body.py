"""Body segmentation: text blocks → heading, paragraphs and line groups.

The first block is always the heading, regardless of how many blocks the
title consumed and of how many lines it has. Every later block becomes a
line group when it spans several lines, a paragraph otherwise.
"""

from __future__ import annotations

from collections.abc import Iterable

from pitaval.structuring.types import BodyNode, Heading, Paragraph, VerseGroup

__all__ = ["classify_block", "segment_body"]


def classify_block(index: int, block: str) -> BodyNode:
    if index == 0:
        return Heading(block.replace("\n", " "))
    if "\n" in block:
        return VerseGroup(tuple(block.split("\n")))
    return Paragraph(block)


def segment_body(blocks: Iterable[str]) -> list[BodyNode]:
    """Classify ``blocks`` in order; an empty input yields no nodes."""
    return [classify_block(i, block) for i, block in enumerate(blocks)]
