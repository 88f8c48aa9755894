"""Pretty printers for assembled TEI documents.

A formatter is any callable taking the serialized document and returning
the reformatted text. Two are provided:

- :func:`lxml_formatter` reparses the document with lxml and pretty prints
  it in-process.
- :class:`XmllintFormatter` pipes the document through ``xmllint --format``
  via a temporary file, which is removed on every path.

Both raise :class:`~pitaval.errors.FormatterError` on malformed input.
"""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
import tempfile
from collections.abc import Callable
from pathlib import Path

from lxml import etree

from pitaval.errors import ConfigurationError, FormatterError

__all__ = ["Formatter", "lxml_formatter", "XmllintFormatter", "get_formatter", "FORMATTERS"]

logger = logging.getLogger(__name__)

Formatter = Callable[[str], str]

# xmllint reports problems as "<file>:<line>: parser error : ..."
_XMLLINT_ERROR_RE = re.compile(r"\berror\s+:\s+")


def lxml_formatter(xml: str) -> str:
    """Reindent ``xml`` and prepend a UTF-8 XML declaration."""
    parser = etree.XMLParser(remove_blank_text=True, resolve_entities=False)
    try:
        root = etree.fromstring(xml.encode("utf-8"), parser)
    except etree.XMLSyntaxError as exc:
        raise FormatterError(f"lxml could not parse document: {exc}", output=str(exc)) from exc
    pretty = etree.tostring(root, pretty_print=True, encoding="utf-8", xml_declaration=True)
    return pretty.decode("utf-8")


class XmllintFormatter:
    """Format documents with the ``xmllint`` command line tool."""

    def __init__(self, binary: str | None = None) -> None:
        self.binary = binary or shutil.which("xmllint")

    def __call__(self, xml: str) -> str:
        if self.binary is None:
            raise FormatterError("xmllint not found on PATH")

        fd, tmp_name = tempfile.mkstemp(suffix=".xml", prefix="pitaval_")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(xml)
            proc = subprocess.run(
                [self.binary, "--encode", "utf8", "--format", tmp_name],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        finally:
            Path(tmp_name).unlink(missing_ok=True)

        pretty = proc.stdout.decode("utf-8", errors="replace")
        if _XMLLINT_ERROR_RE.search(pretty):
            logger.error("xmllint output:\n%s", pretty)
            raise FormatterError("xmllint reported an error", output=pretty)
        return pretty


FORMATTERS: dict[str, Callable[[], Formatter]] = {
    "lxml": lambda: lxml_formatter,
    "xmllint": XmllintFormatter,
}


def get_formatter(name: str) -> Formatter:
    """Return the formatter registered under ``name``."""
    try:
        factory = FORMATTERS[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown formatter {name!r}; choose one of {', '.join(sorted(FORMATTERS))}"
        ) from None
    return factory()
