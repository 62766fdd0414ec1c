"""Tests for XF payload parsing and merging."""

from __future__ import annotations

import pytest

from xfmeta.meta import TextKind, TextMeta, XfField, XfMeta
from xfmeta.xf import (
    COMMON,
    PER_LANGUAGE,
    XF_HEADER_LABELS,
    XF_LANGUAGE_LABELS,
    merge_xf,
    parse_xf_text,
    xf_tag,
)


def test_label_tables() -> None:
    assert len(XF_HEADER_LABELS) == 13
    assert len(XF_LANGUAGE_LABELS) == 8
    assert XF_HEADER_LABELS[0] == XF_LANGUAGE_LABELS[0] == "ID"
    assert XF_HEADER_LABELS[-1] == "Keywords"
    assert XF_LANGUAGE_LABELS[2] == "Title"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("XFhd:1999", "XFhd"),
        ("XFln:JP", "XFln"),
        ("XFhd", "XFhd"),
        ("XFkm:1", None),
        ("xfhd:1999", None),
        ("XF", None),
        ("", None),
    ],
)
def test_xf_tag(text: str, expected: str | None) -> None:
    assert xf_tag(text) == expected


def test_header_fields_are_labelled_by_position() -> None:
    category, fields = parse_xf_text("XFhd:1999/01/01:JP:Pops:8beat:Piano:Male:Comp:Lyr:Arr:Perf:Prod:love,summer")
    assert category == COMMON
    assert [f.label for f in fields] == list(XF_HEADER_LABELS[1:])
    assert fields[0] == XfField("Release Date", "1999/01/01")
    assert fields[-1] == XfField("Keywords", "love,summer")


def test_language_fields() -> None:
    category, fields = parse_xf_text("XFln:L1:Song:Comp:Lyr:Arr:Perf:Prod")
    assert category == PER_LANGUAGE
    assert fields[:2] == [XfField("Language", "L1"), XfField("Title", "Song")]
    assert fields[-1] == XfField("Data Producer", "Prod")


def test_empty_fields_are_skipped_but_positions_kept() -> None:
    _, fields = parse_xf_text("XFln:JP::Composer X")
    assert fields == [XfField("Language", "JP"), XfField("Composer", "Composer X")]


def test_fields_past_the_table_are_dropped() -> None:
    _, fields = parse_xf_text("XFln:a:b:c:d:e:f:g:h:i")
    assert len(fields) == len(XF_LANGUAGE_LABELS) - 1
    assert fields[-1] == XfField("Data Producer", "g")


def test_parse_rejects_non_xf_text() -> None:
    with pytest.raises(ValueError):
        parse_xf_text("hello")


def test_merge_into_empty_list_creates_record() -> None:
    events = []
    merge_xf(events, COMMON, [XfField("Genre", "Pops")])
    assert events == [XfMeta(common=[XfField("Genre", "Pops")])]


def test_merge_folds_into_trailing_record() -> None:
    events = [XfMeta(common=[XfField("Genre", "Pops")])]
    merge_xf(events, PER_LANGUAGE, [XfField("Title", "A")])
    merge_xf(events, PER_LANGUAGE, [XfField("Title", "B")])
    merge_xf(events, COMMON, [XfField("Rhythm", "8beat")])
    assert len(events) == 1
    assert events[0].common == [XfField("Genre", "Pops"), XfField("Rhythm", "8beat")]
    assert [f.text for f in events[0].per_language] == ["A", "B"]


def test_merge_after_text_meta_starts_new_record() -> None:
    events = [XfMeta(), TextMeta(TextKind.TEXT, "x")]
    merge_xf(events, COMMON, [])
    assert len(events) == 3
    assert events[2] == XfMeta()


def test_find_prefers_per_language() -> None:
    record = XfMeta(
        common=[XfField("Composer", "common composer")],
        per_language=[XfField("Language", "JP"), XfField("Composer", "jp composer")],
    )
    assert record.find("Composer") == "jp composer"
    assert record.find("Language") == "JP"
    assert record.find("Keywords") is None
