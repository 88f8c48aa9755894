"""Reading Pitaval transcriptions: filename metadata and text blocks."""

from pitaval.ingestion.filename import FilenameInfo, output_filename, parse_filename
from pitaval.ingestion.text_normalizer import normalize_blocks, normalize_text, split_blocks

__all__ = [
    "FilenameInfo",
    "output_filename",
    "parse_filename",
    "normalize_blocks",
    "normalize_text",
    "split_blocks",
]
