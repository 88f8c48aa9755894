"""Populate the TEI template with the structured view of a narrative.

The template is reparsed for every document so that no state carries over
from one file to the next. Target nodes are located by XPath:

- ``//t:title[@type="main"]``: title
- ``//t:biblScope[@unit="volume"]``: volume number
- ``//t:sourceDesc/t:biblFull/t:publicationStmt/t:date``: year
- ``//t:sourceDesc/t:bibl``: full citation
- ``//t:sourceDesc/t:biblFull/t:titleStmt``: one ``editor`` per editor
- ``/t:TEI/t:text/t:body/t:div``: heading, paragraphs and line groups
"""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from pitaval.errors import TemplateError
from pitaval.structuring.types import BodyNode, ConvertedDocument, EditorRecord, Heading, Paragraph, VerseGroup

__all__ = ["TEI_NS", "TeiAssembler", "render_node", "render_editor", "tei"]

logger = logging.getLogger(__name__)

TEI_NS = "http://www.tei-c.org/ns/1.0"
NSMAP = {"t": TEI_NS}

_XP_TITLE = etree.XPath('//t:title[@type="main"]', namespaces=NSMAP)
_XP_VOLUME = etree.XPath('//t:biblScope[@unit="volume"]', namespaces=NSMAP)
_XP_DATE = etree.XPath("//t:sourceDesc/t:biblFull/t:publicationStmt/t:date", namespaces=NSMAP)
_XP_BIBL = etree.XPath("//t:sourceDesc/t:bibl", namespaces=NSMAP)
_XP_TITLE_STMT = etree.XPath("//t:sourceDesc/t:biblFull/t:titleStmt", namespaces=NSMAP)
_XP_BODY_DIV = etree.XPath("/t:TEI/t:text/t:body/t:div", namespaces=NSMAP)


def tei(tag: str, text: str | None = None, **attrib: str) -> etree._Element:
    """Create an element in the TEI namespace."""
    el = etree.Element(f"{{{TEI_NS}}}{tag}", attrib, nsmap={None: TEI_NS})
    if text is not None:
        el.text = text
    return el


def _append_text(el: etree._Element, text: str) -> None:
    # Text goes after any existing content, like a DOM appendText.
    if len(el):
        last = el[-1]
        last.tail = (last.tail or "") + text
    else:
        el.text = (el.text or "") + text


def render_editor(editor: EditorRecord) -> etree._Element:
    el = tei("editor")
    pers = etree.SubElement(el, f"{{{TEI_NS}}}persName", ref=editor.ref)
    pers.append(tei("surname", editor.surname))
    pers.append(tei("forename", editor.forename))
    return el


def render_node(node: BodyNode) -> etree._Element:
    """Render one body node: ``head``, ``p`` or ``lg`` of ``l``/``lb`` pairs."""
    if isinstance(node, Heading):
        return tei("head", node.text)
    if isinstance(node, Paragraph):
        return tei("p", node.text)
    if isinstance(node, VerseGroup):
        lg = tei("lg")
        for line in node.lines:
            lg.append(tei("l", line))
            lg.append(tei("lb"))
        return lg
    raise TypeError(f"unsupported body node: {node!r}")


class TeiAssembler:
    """Build TEI documents from a template file."""

    def __init__(self, template_path: str | Path) -> None:
        self.template_path = Path(template_path)
        self._parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)

    def load_template(self) -> etree._ElementTree:
        try:
            return etree.parse(str(self.template_path), self._parser)
        except OSError as exc:
            raise TemplateError(f"cannot read template {self.template_path}: {exc}") from exc
        except etree.XMLSyntaxError as exc:
            raise TemplateError(f"template {self.template_path} is not well-formed: {exc}") from exc

    def assemble(self, doc: ConvertedDocument) -> etree._ElementTree:
        """Return a fresh template tree filled with ``doc``.

        Raises:
            TemplateError: If the template cannot be parsed or lacks the
                source title statement or the body ``div``.
        """
        tree = self.load_template()
        src = doc.source

        for el in _XP_TITLE(tree):
            _append_text(el, doc.title)
        for el in _XP_VOLUME(tree):
            _append_text(el, str(src.volume))
        for el in _XP_DATE(tree):
            _append_text(el, str(src.year))
        for el in _XP_BIBL(tree):
            _append_text(el, doc.citation)

        title_stmt = _first(_XP_TITLE_STMT(tree), "sourceDesc/biblFull/titleStmt", self.template_path)
        for editor in doc.editors:
            title_stmt.append(render_editor(editor))

        body = _first(_XP_BODY_DIV(tree), "TEI/text/body/div", self.template_path)
        for node in doc.body:
            body.append(render_node(node))

        logger.debug("assembled %s: %d body nodes, %d editors", src.stem, len(doc.body), len(doc.editors))
        return tree


def _first(found: list[etree._Element], what: str, template: Path) -> etree._Element:
    if not found:
        raise TemplateError(f"template {template} has no {what} element")
    return found[0]
