#!/usr/bin/env python3
"""
Inspect a parsed script JSON (as written by scripts/parse_script.py).

This script is intentionally simple and "human-in-the-loop":
- Print the Act/Scene sections that were detected.
- Print the first N lines, each tagged with its line type.
- Filter lines by type or by substring.
- Show how many lines fell into each type.

Use cases:
1) Quick quality check after parsing:
   python scripts/inspect_script.py --file data/processed/hamlet.json --top 40

2) Check which lines were taken as character cues:
   python scripts/inspect_script.py --file data/processed/hamlet.json --type character_name --top 100

3) Find a speech:
   python scripts/inspect_script.py --file data/processed/hamlet.json --contains "to be"

4) Type distribution only:
   python scripts/inspect_script.py --file data/processed/hamlet.json --stats
"""

from __future__ import annotations

import argparse
import re
from collections import Counter
from typing import List, Optional, Tuple

from script_structure.io.jsonio import load_script
from script_structure.models import LineType, Script, ScriptLine
from script_structure.text.classify import classify


def normalize(s: str) -> str:
    """Lowercase + collapse whitespace for loose matching."""
    s = s.lower().strip()
    s = re.sub(r"\s+", " ", s)
    return s


def typed_lines(script: Script) -> List[Tuple[ScriptLine, LineType]]:
    """Pair every line with its (recomputed) line type."""
    return [(ln, classify(ln.content)) for ln in script.lines]


def matches_filters(
    line: ScriptLine,
    line_type: LineType,
    *,
    type_filter: Optional[str],
    contains: Optional[str],
) -> bool:
    if type_filter and normalize(type_filter) != line_type.value:
        return False
    if contains and normalize(contains) not in normalize(line.content):
        return False
    return True


def print_sections(script: Script) -> None:
    print("=" * 80)
    print(f"{script.name}  |  lines={len(script.lines)}  |  sections={len(script.sections)}")
    for sec in script.sections:
        indent = "  " if sec.type.value == "scene" else ""
        print(f"{indent}{sec.type.display_name:<6} line {sec.start_line_number:>5}  {sec.title}")
    print("=" * 80)


def main() -> None:
    ap = argparse.ArgumentParser(description="Inspect a parsed script JSON.")
    ap.add_argument("--file", required=True, help="Path to script JSON file.")
    ap.add_argument("--top", type=int, default=40, help="Number of lines to print after filtering.")
    ap.add_argument(
        "--type",
        default=None,
        choices=[t.value for t in LineType],
        help="Filter: only lines of this type.",
    )
    ap.add_argument("--contains", default=None, help="Filter: line contains this substring (case-insensitive).")
    ap.add_argument("--no_sections", action="store_true", help="Do not print the section list.")
    ap.add_argument("--stats", action="store_true", help="Print line type counts and exit.")

    args = ap.parse_args()
    script = load_script(args.file)
    pairs = typed_lines(script)

    if args.stats:
        c = Counter(lt.value for _, lt in pairs)
        print(f"Lines: {len(pairs)}  Sections: {len(script.sections)}")
        for k, v in c.most_common():
            print(f"{k}: {v}")
        return

    if not args.no_sections:
        print_sections(script)

    filtered = [
        (ln, lt) for ln, lt in pairs
        if matches_filters(ln, lt, type_filter=args.type, contains=args.contains)
    ]
    for ln, lt in filtered[: args.top]:
        print(f"{ln.line_number:>5}  {lt.value:<16} {ln.content}")

    if not filtered:
        print("[info] No lines matched your filters.")


if __name__ == "__main__":
    main()
