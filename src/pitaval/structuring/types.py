"""Type definitions for the structured view of one narrative.

These are small frozen records: the structuring functions produce them and
the TEI assembler consumes them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """One input file as read from disk."""

    stem: str
    volume: int
    year: int
    sequence: int
    text: str


@dataclass(frozen=True, slots=True)
class EditorRecord:
    """An editor of the printed series with their GND authority number."""

    surname: str
    forename: str
    gnd: str

    @property
    def ref(self) -> str:
        return f"https://d-nb.info/gnd/{self.gnd}"


@dataclass(frozen=True, slots=True)
class Heading:
    """First block of a narrative, line breaks flattened."""

    text: str


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Single-line prose block, kept verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class VerseGroup:
    """Multi-line block after the first, one entry per line."""

    lines: tuple[str, ...]


BodyNode = Heading | Paragraph | VerseGroup


@dataclass(frozen=True, slots=True)
class ConvertedDocument:
    """Everything the assembler needs to fill the template for one file."""

    source: SourceDocument
    title: str
    citation: str
    editors: tuple[EditorRecord, ...]
    body: tuple[BodyNode, ...]
