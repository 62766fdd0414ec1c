#!/usr/bin/env python3
"""Show the text metadata (names, lyrics, XF song info) of MIDI files.

Files are listed by name.  Each entry shows the song name (XF title when
present, else the sequence name), then the per-track detail view.  Files
that fail to decode show the decoder's message; files that decode but
carry no text show "No metadata found.".

Examples
--------
    python tools/inspect_xf.py "songs/**/*.mid"
    python tools/inspect_xf.py song.mid --json
"""

from __future__ import annotations

import argparse
import dataclasses
import glob
import json
import logging
from pathlib import Path
import sys
from typing import Iterable, List

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from xfmeta.events import TEXT_ENCODING  # noqa: E402
from xfmeta.meta import XfMeta  # noqa: E402
from xfmeta.summary import FileReport, decode_files, format_report  # noqa: E402


def collect_paths(patterns: Iterable[str]) -> List[Path]:
    paths: List[Path] = []
    for pattern in patterns:
        matches = sorted(Path(p) for p in glob.glob(pattern, recursive=True))
        if matches:
            paths.extend(matches)
        else:
            candidate = Path(pattern)
            if candidate.exists():
                paths.append(candidate)
    seen: set[Path] = set()
    unique_paths: List[Path] = []
    for path in paths:
        resolved = path.resolve()
        if resolved not in seen:
            seen.add(resolved)
            unique_paths.append(path)
    return unique_paths


def report_to_dict(report: FileReport) -> dict:
    tracks = []
    for track in report.tracks:
        events = []
        for event in track.events:
            if isinstance(event, XfMeta):
                events.append({"type": "XF", **dataclasses.asdict(event)})
            else:
                events.append({"type": event.label, "text": event.text})
        tracks.append({"track": track.track, "events": events})
    return {
        "name": report.name,
        "status": report.status,
        "song_name": report.song_name,
        "error": str(report.error) if report.error is not None else None,
        "tracks": tracks,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="List SMF text metadata and Yamaha XF song information."
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="File paths or glob patterns (quotes recommended for wildcards).",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text.")
    parser.add_argument(
        "--encoding",
        default=TEXT_ENCODING,
        help=f"Codec for text payloads (default: {TEXT_ENCODING}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log decoder details.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    targets = collect_paths(args.paths)
    if not targets:
        parser.error("No files matched the provided paths/patterns.")

    reports = decode_files(
        ((str(path), path.read_bytes()) for path in targets), encoding=args.encoding
    )

    if args.json:
        json.dump([report_to_dict(r) for r in reports], sys.stdout, ensure_ascii=False, indent=2)
        print()
        return 0

    for idx, report in enumerate(reports):
        if idx:
            print()
        print(f"== {report.name}")
        if report.song_name:
            print(f"Song: {report.song_name}")
        print(format_report(report))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
