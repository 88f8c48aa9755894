"""Batch orchestrator: Pitaval ``.txt`` files → TEI P5 XML files.

This module composes:
- ingestion.filename for volume/year/sequence and output names.
- ingestion.text_normalizer for cleanup and paragraph-mode blocks.
- structuring.{title, editors, body} for the semantic pieces.
- tei.assembler.TeiAssembler for template population.
- an injected formatter (see tei.formatter) for the final serialization.

Files are processed one at a time in sorted name order. The first error
aborts the whole run; no file is skipped.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from pathlib import Path

from lxml import etree

from pitaval.errors import (
    FilenameError,
    FilesystemError,
    FormatterError,
    InvalidInputError,
    NormalizationError,
    OutputCollisionError,
)
from pitaval.ingestion.filename import output_filename, parse_filename
from pitaval.ingestion.text_normalizer import normalize_blocks
from pitaval.logging_setup import log_call
from pitaval.structuring.body import segment_body
from pitaval.structuring.editors import select_editors
from pitaval.structuring.title import build_citation, extract_title
from pitaval.structuring.types import ConvertedDocument, SourceDocument
from pitaval.tei.assembler import TeiAssembler
from pitaval.tei.formatter import Formatter, lxml_formatter

__all__ = ["ConvertPipeline", "INPUT_SUFFIX", "read_source", "structure_document"]

logger = logging.getLogger(__name__)

INPUT_SUFFIX = ".txt"


def read_source(stem: str, raw: str) -> SourceDocument:
    """Wrap ``raw`` text with the metadata encoded in ``stem``.

    Raises:
        FilenameError: If ``stem`` does not start with ``Bd<vol>_<year>_<no>``.
    """
    info = parse_filename(stem)
    if info is None:
        raise FilenameError(f"{stem}: filename does not match Bd<volume>_<year>_<number>")
    return SourceDocument(stem=stem, volume=info.volume, year=info.year, sequence=info.sequence, text=raw)


def structure_document(source: SourceDocument) -> ConvertedDocument:
    """Derive title, citation, editors and body nodes for ``source``.

    Title extraction and body segmentation walk the same block list
    independently; the heading is always the first block.
    """
    blocks = normalize_blocks(source.text)
    if not blocks:
        raise InvalidInputError(f"{source.stem}: file contains no text")
    title = extract_title(blocks)
    return ConvertedDocument(
        source=source,
        title=title,
        citation=build_citation(title, source.volume, source.year),
        editors=select_editors(source.volume),
        body=tuple(segment_body(blocks)),
    )


@dataclass
class ConvertPipeline:
    assembler: TeiAssembler
    formatter: Formatter = lxml_formatter
    _claimed: dict[str, Path] = field(default_factory=dict, init=False, repr=False)

    def render(self, doc: ConvertedDocument) -> str:
        tree = self.assembler.assemble(doc)
        xml = etree.tostring(tree, encoding="unicode")
        try:
            return self.formatter(xml)
        except FormatterError:
            logger.debug("unformatted document for %s:\n%s", doc.source.stem, xml)
            raise

    @log_call()
    def convert_file(self, path: Path) -> str:
        """Convert one input file and return the formatted XML.

        Any Python warning emitted while the file is processed, and any
        character XML cannot hold, is turned into a
        :class:`NormalizationError` naming the file. A leading byte order
        mark is dropped.
        """
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FilesystemError(f"cannot read {path}: {exc}") from exc

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            try:
                raw = data.decode("utf-8-sig")
                source = read_source(path.stem, raw)
                return self.render(structure_document(source))
            except UnicodeDecodeError as exc:
                raise NormalizationError(str(path), f"not valid UTF-8: {exc}") from exc
            except ValueError as exc:
                # lxml rejects control characters that XML 1.0 cannot carry
                raise NormalizationError(str(path), f"cannot be represented as XML: {exc}") from exc
            except Warning as exc:
                raise NormalizationError(str(path), f"{type(exc).__name__}: {exc}") from exc

    def run(self, indir: str | Path, outdir: str | Path) -> list[Path]:
        """Convert every ``*.txt`` in ``indir`` into ``outdir``.

        Returns:
            Written output paths, in processing order.

        Raises:
            FilesystemError: If ``indir`` is missing, ``outdir`` cannot be
                created, or an output cannot be written.
            OutputCollisionError: If two inputs share a normalized name.
        """
        in_d = Path(indir)
        out_d = Path(outdir)
        if not in_d.is_dir():
            raise FilesystemError(f"input directory not found: {in_d}")
        try:
            out_d.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"{out_d}: {exc}") from exc

        self._claimed.clear()
        written: list[Path] = []
        for path in sorted(in_d.glob(f"*{INPUT_SUFFIX}")):
            logger.info("parsing text file: %s", path)
            target = self._claim(out_d, path)
            pretty = self.convert_file(path)
            logger.info("writing XML file: %s", target)
            try:
                target.write_text(pretty, encoding="utf-8")
            except OSError as exc:
                raise FilesystemError(f"cannot write {target}: {exc}") from exc
            written.append(target)
        logger.info("converted %d file(s) from %s", len(written), in_d)
        return written

    def _claim(self, out_d: Path, source: Path) -> Path:
        name = output_filename(source.stem)
        previous = self._claimed.get(name)
        if previous is not None:
            raise OutputCollisionError(f"{source} and {previous} both map to {name}")
        self._claimed[name] = source
        return out_d / name
