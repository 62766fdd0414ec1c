"""Tests for song-name selection and the text report."""

from __future__ import annotations

from xfmeta.errors import NotMidiFile
from xfmeta.fixtures import build_xf_file
from xfmeta.meta import TextKind, TextMeta, TrackMeta, XfField, XfMeta
from xfmeta.summary import (
    NO_METADATA,
    STATUS_EMPTY,
    STATUS_ERROR,
    STATUS_OK,
    FileReport,
    decode_files,
    format_report,
    format_tracks,
    has_metadata,
    non_empty_tracks,
    song_name,
)

HEADER = bytes.fromhex("4D546864 00000006 0001 0001 0060")
TRACK_ABC = bytes.fromhex("4D54726B 0000000B 00 FF 03 03 414243 00 FF 2F 00")
EMPTY_TRACK = bytes.fromhex("4D54726B 00000004 00 FF 2F 00")


def _name(text: str, *, first_track: bool = True) -> TextMeta:
    return TextMeta(TextKind.SEQUENCE_OR_TRACK_NAME, text, first_track=first_track)


def test_non_empty_tracks() -> None:
    tracks = [TrackMeta(1), TrackMeta(2, [_name("x", first_track=False)]), TrackMeta(3)]
    assert [t.track for t in non_empty_tracks(tracks)] == [2]
    assert has_metadata(tracks)
    assert not has_metadata([TrackMeta(1), TrackMeta(2)])
    assert not has_metadata([])


class TestSongName:
    def test_sequence_name_of_first_track(self) -> None:
        tracks = [TrackMeta(1, [TextMeta(TextKind.TEXT, "memo"), _name("Song")])]
        assert song_name(tracks) == "Song"

    def test_later_track_names_are_not_song_names(self) -> None:
        tracks = [TrackMeta(1), TrackMeta(2, [_name("Piano", first_track=False)])]
        assert song_name(tracks) is None

    def test_xf_title_wins(self) -> None:
        xf = XfMeta(per_language=[XfField("Language", "JP"), XfField("Title", "XF Title")])
        tracks = [TrackMeta(1, [_name("Seq")]), TrackMeta(2, [xf])]
        assert song_name(tracks) == "XF Title"

    def test_per_language_title_over_common(self) -> None:
        xf = XfMeta(common=[XfField("Title", "Common")], per_language=[XfField("Title", "Local")])
        assert song_name([TrackMeta(1, [xf])]) == "Local"

    def test_common_title_over_sequence_name(self) -> None:
        xf = XfMeta(common=[XfField("Title", "Common")])
        assert song_name([TrackMeta(1, [_name("Seq"), xf])]) == "Common"

    def test_empty(self) -> None:
        assert song_name([]) is None

    def test_from_decoded_xf_file(self) -> None:
        report = decode_files([("a.mid", build_xf_file("Title A", sequence_name="Seq A"))])[0]
        assert report.song_name == "Title A"
        assert report.display_name == "Title A"


def test_decode_files_sorts_and_isolates_failures() -> None:
    reports = decode_files(
        [
            ("c.mid", HEADER + TRACK_ABC),
            ("a.txt", b"hello"),
            ("b.mid", HEADER + EMPTY_TRACK),
        ]
    )
    assert [r.name for r in reports] == ["a.txt", "b.mid", "c.mid"]
    assert [r.status for r in reports] == [STATUS_ERROR, STATUS_EMPTY, STATUS_OK]
    assert isinstance(reports[0].error, NotMidiFile)
    assert reports[0].tracks == []
    assert reports[0].song_name is None
    assert reports[0].display_name == "a.txt"
    assert reports[2].song_name == "ABC"


def test_format_report_error_is_verbatim() -> None:
    report = decode_files([("x.mid", b"RIFF0000")])[0]
    assert format_report(report) == str(report.error)


def test_format_report_without_metadata() -> None:
    assert format_report(FileReport(name="e.mid", tracks=[TrackMeta(1)])) == NO_METADATA
    assert format_tracks([]) == NO_METADATA


def test_format_tracks_layout() -> None:
    xf = XfMeta(common=[XfField("Genre", "Pops")], per_language=[XfField("Title", "Song")])
    tracks = [
        TrackMeta(1, [_name("Seq"), TextMeta(TextKind.LYRICS, "la")]),
        TrackMeta(2),
        TrackMeta(3, [_name("Bass", first_track=False), xf]),
    ]
    assert format_tracks(tracks).splitlines() == [
        "Track 1",
        "  Sequence Name: Seq",
        "  Lyrics: la",
        "Track 3",
        "  Track Name: Bass",
        "  XF (common)",
        "    Genre: Pops",
        "  XF (per-language)",
        "    Title: Song",
    ]
