from __future__ import annotations

import pytest

from pitaval.errors import InvalidInputError
from pitaval.structuring.title import build_citation, extract_title


def test_title_stops_at_first_block_ending_in_period() -> None:
    blocks = ["Der Mord", " im Walde.", "Erster Absatz."]
    assert extract_title(blocks) == "Der Mord im Walde."


def test_title_flattens_newlines_and_collapses_whitespace() -> None:
    blocks = ["Die Giftmischerin\nGesche   Margarethe\tGottfried."]
    title = extract_title(blocks)
    assert title == "Die Giftmischerin Gesche Margarethe Gottfried."
    assert "\n" not in title


def test_title_concatenates_without_separator() -> None:
    assert extract_title(["Ab", "cd."]) == "Abcd."


def test_title_consumes_everything_without_period() -> None:
    assert extract_title(["Eins", "\nZwei"]) == "Eins Zwei"


def test_title_does_not_mutate_blocks() -> None:
    blocks = ["A.", "B"]
    extract_title(blocks)
    assert blocks == ["A.", "B"]


def test_title_on_empty_input_raises() -> None:
    with pytest.raises(InvalidInputError):
        extract_title([])


def test_citation_appends_period_when_missing() -> None:
    assert (
        build_citation("Der Müller Arnold", 3, 1843)
        == "Der Müller Arnold. In: Der neue Pitaval, Bd. 3. Leipzig, 1843."
    )


def test_citation_keeps_existing_period() -> None:
    assert (
        build_citation("A short title.", 5, 1845)
        == "A short title. In: Der neue Pitaval, Bd. 5. Leipzig, 1845."
    )
