#!/usr/bin/env python3
"""Write a small XF-style MIDI file for trying out the inspector."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from xfmeta.events import TEXT_ENCODING  # noqa: E402
from xfmeta.fixtures import build_xf_file  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("output", type=Path, help="Destination .mid path.")
    parser.add_argument("--title", default="Sample Song", help="XF title (XFln field 2).")
    parser.add_argument("--language", default="JP", help="XF language code.")
    parser.add_argument("--composer", default="", help="Composer for XFhd/XFln.")
    parser.add_argument("--sequence-name", default=None, help="Track 1 sequence name.")
    parser.add_argument("--charset", default=TEXT_ENCODING, help="Text codec.")
    args = parser.parse_args(argv)

    header = ["1999/01/01", "JP", "Pops", "", "", "", args.composer]
    languages = [[args.language, args.title, args.composer]]
    try:
        data = build_xf_file(
            args.title,
            sequence_name=args.sequence_name,
            header=header,
            languages=languages,
            charset=args.charset,
        )
    except (UnicodeEncodeError, LookupError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(data)
    print(f"Wrote {args.output} ({len(data)} bytes)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
