"""Raw transcription text → normalized text → paragraph blocks.

Key invariants:
- Lines starting with a form feed (running page titles of the scans) are
  emptied, so they act as blank lines.
- No carriage returns survive; the text carries no trailing whitespace.
- Blocks are maximal runs of non-blank lines, in source order, with their
  internal line breaks preserved. Whitespace-only lines separate blocks,
  unlike a plain split on runs of empty lines, so a line of spaces inside a
  verse passage starts a new block.
- Line endings are unified before form-feed lines are emptied, so a running
  title after a lone CR is caught too.
"""

from __future__ import annotations

import re

__all__ = ["normalize_text", "split_blocks", "normalize_blocks"]

_FORM_FEED_LINE_RE = re.compile(r"^\f.*", re.MULTILINE)
_BLOCK_SEP_RE = re.compile(r"\n[^\S\n]*(?:\n[^\S\n]*)*\n")
_LEADING_BLANK_RE = re.compile(r"\A(?:[^\S\n]*\n)+")


def normalize_text(raw: str) -> str:
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = _FORM_FEED_LINE_RE.sub("", text)
    return text.rstrip()


def split_blocks(text: str) -> list[str]:
    """Split normalized ``text`` in paragraph mode.

    Args:
        text: Output of :func:`normalize_text` (LF line endings).

    Returns:
        Ordered list of blocks, each right-trimmed and non-empty.
    """
    parts = _BLOCK_SEP_RE.split(_LEADING_BLANK_RE.sub("", text))
    return [p.rstrip() for p in parts if p.strip()]


def normalize_blocks(raw: str) -> list[str]:
    """Normalize ``raw`` and split it into blocks in one step."""
    return split_blocks(normalize_text(raw))
