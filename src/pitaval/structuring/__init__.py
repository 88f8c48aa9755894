"""Structuring package exports.

Expose the title, citation, editor and body derivations used to build one
TEI document.
"""

from pitaval.structuring.body import segment_body
from pitaval.structuring.editors import EDITORS, select_editors
from pitaval.structuring.title import build_citation, extract_title

__all__ = ["EDITORS", "build_citation", "extract_title", "segment_body", "select_editors"]
