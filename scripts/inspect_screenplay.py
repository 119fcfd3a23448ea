#!/usr/bin/env python3
"""
Inspect one or more Fountain screenplays.

For each file: parse it, print line/scene/character/page/word counts and the
most frequent speakers, and optionally dump every classified line to JSON.

Examples:
   python scripts/inspect_screenplay.py scripts/big-fish.fountain
   python scripts/inspect_screenplay.py drafts/*.fountain --top_characters 5
   python scripts/inspect_screenplay.py draft.fountain --dump_dir data/parsed
"""
from __future__ import annotations

import argparse
import os
import sys
from typing import List

from tqdm import tqdm

from fountain_project.io.document import DocumentError, ScreenplayDocument
from fountain_project.io.parse_dump import build_parse_dump, write_parse_dump


def summarize(doc: ScreenplayDocument, top_characters: int) -> List[str]:
    out = [
        f"== {doc.name}",
        f"   lines={len(doc.lines)} scenes={len(doc.scene_headings)} "
        f"characters={len(doc.character_names)} pages~{doc.page_count} words={doc.word_count}",
    ]
    if doc.title_page:
        out.append(f"   title_page={', '.join(doc.title_page)}")
    if len(doc.settings):
        out.append(f"   settings={', '.join(doc.settings)}")
    freq = doc.parser.character_frequencies()
    for name, count in freq.most_common(top_characters):
        out.append(f"   {count:4d}  {name}")
    return out


def main() -> int:
    ap = argparse.ArgumentParser(description="Parse Fountain screenplays and report their structure.")
    ap.add_argument("files", nargs="+", help="Fountain files to inspect.")
    ap.add_argument(
        "--dump_dir",
        default=None,
        help="If set, write <name>.parsed.json with every classified line here.",
    )
    ap.add_argument(
        "--top_characters",
        type=int,
        default=10,
        help="How many speakers to list per file, by cue count.",
    )
    ap.add_argument("--quiet", action="store_true", help="Only print warnings and the final line.")
    args = ap.parse_args()

    failed = 0
    reports: List[str] = []
    for path in tqdm(args.files, desc="parse", disable=args.quiet or len(args.files) < 2):
        try:
            doc = ScreenplayDocument.from_file(path)
        except DocumentError as exc:
            print(f"[warn] {exc}", flush=True)
            failed += 1
            continue

        reports.extend(summarize(doc, args.top_characters))

        if args.dump_dir:
            dump_path = os.path.join(args.dump_dir, f"{doc.name}.parsed.json")
            write_parse_dump(dump_path, build_parse_dump(doc))
            reports.append(f"   dump -> {dump_path}")

    if not args.quiet:
        print("\n".join(reports), flush=True)
    print(f"[ok] parsed={len(args.files) - failed} failed={failed}", flush=True)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
