from __future__ import annotations

from pitaval.structuring.body import classify_block, segment_body
from pitaval.structuring.types import Heading, Paragraph, VerseGroup


def test_first_block_is_always_heading() -> None:
    assert segment_body(["Line one\nLine two"]) == [Heading("Line one Line two")]
    assert classify_block(0, "Ein Absatz.") == Heading("Ein Absatz.")


def test_heading_only_flattens_newlines() -> None:
    assert classify_block(0, "A  b\nc") == Heading("A  b c")


def test_multiline_block_becomes_verse_group() -> None:
    node = classify_block(1, "foo\nbar")
    assert node == VerseGroup(("foo", "bar"))


def test_single_line_block_is_paragraph_verbatim() -> None:
    text = "  Er   sprach:  »Nein.«"
    assert classify_block(2, text) == Paragraph(text)


def test_segment_body_preserves_order() -> None:
    nodes = segment_body(["Titel.", "Absatz eins.", "Vers\nVers", "Absatz zwei."])
    assert [type(n) for n in nodes] == [Heading, Paragraph, VerseGroup, Paragraph]


def test_heading_independent_of_title_length() -> None:
    # The title spans two blocks here, the heading is still just block 0.
    nodes = segment_body(["Der Fall", " Fonk.", "Text."])
    assert nodes[0] == Heading("Der Fall")
    assert nodes[1] == Paragraph(" Fonk.")


def test_empty_sequence_yields_no_nodes() -> None:
    assert segment_body([]) == []
