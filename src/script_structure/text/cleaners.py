from __future__ import annotations

from typing import List

from script_structure.models import RawLine


def split_raw_lines(text: str) -> List[RawLine]:
    """
    Split extracted document text into trimmed, non-empty raw lines.

    Any newline convention is accepted (\\n, \\r\\n, \\r and the other
    separators str.splitlines() knows). Surrounding whitespace is stripped
    and lines that end up empty are dropped; interior spacing is kept
    as extracted.

    Args:
        text: Page texts concatenated in page order.

    Returns:
        RawLine objects indexed 0..N-1 in stream order. Empty or
        whitespace-only input gives an empty list.
    """
    raw_lines: List[RawLine] = []
    for ln in text.splitlines():
        s = ln.strip()
        if not s:
            continue
        raw_lines.append(RawLine(index=len(raw_lines), text=s))
    return raw_lines
