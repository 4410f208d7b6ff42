#!/usr/bin/env python
import argparse
import os

from script_structure.pipeline.parse_script import parse_pdf


def main() -> None:
    """
    Command-line entry point: parse a script PDF into lines and sections.

    This script is intentionally thin: all the real work happens in
    script_structure.pipeline.parse_script.parse_pdf().
    """
    ap = argparse.ArgumentParser(description="Parse a theatre script PDF into numbered lines and Act/Scene sections.")
    ap.add_argument("--pdf", required=True, help="Path to the script PDF.")
    ap.add_argument("--out", required=True, help="Path to the output script JSON file.")
    ap.add_argument("--name", default=None, help="Script name (default: PDF file name without extension).")
    ap.add_argument("--no_progress", action="store_true", help="Hide the per-page progress bar.")

    args = ap.parse_args()
    if not os.path.exists(args.pdf):
        raise SystemExit(f"[error] PDF not found: {args.pdf}")

    parse_pdf(
        args.pdf,
        args.name,
        show_progress=not args.no_progress,
        verbose=True,
        dump_path=args.out,
    )


if __name__ == "__main__":
    main()
