"""
segmentation.py

Single forward pass over the normalized raw lines:

    classify current -> ask should_merge() with one line of lookahead
        merge    -> emit "current next", advance by 2
        no merge -> emit current, advance by 1

A raw line folded into its predecessor is never classified on its own
account again or emitted twice. Output depends only on the input lines
and the config, so re-parsing the same text gives the same sequence.
"""
from __future__ import annotations

from typing import List, Sequence

from script_structure.models import LogicalLine, RawLine, ScriptLine
from script_structure.text.classify import classify
from script_structure.text.merge import should_merge
from script_structure.text.vocabulary import DEFAULT_CONFIG, ClassifierConfig


def segment_lines(
    raw_lines: Sequence[RawLine],
    *,
    config: ClassifierConfig = DEFAULT_CONFIG,
) -> List[LogicalLine]:
    # Every raw line is classified exactly once; the lookahead reuses it.
    types = [classify(r.text, config=config) for r in raw_lines]

    out: List[LogicalLine] = []
    i = 0
    n = len(raw_lines)
    while i < n:
        cur = raw_lines[i]
        has_next = i + 1 < n
        if has_next and should_merge(
            cur.text,
            raw_lines[i + 1].text,
            types[i],
            next_type=types[i + 1],
            config=config,
        ):
            text = f"{cur.text} {raw_lines[i + 1].text}"
            out.append(LogicalLine(text=text, line_type=types[i], raw_index=cur.index, merged=True))
            i += 2
        else:
            out.append(LogicalLine(text=cur.text, line_type=types[i], raw_index=cur.index))
            i += 1
    return out


def number_lines(logical_lines: Sequence[LogicalLine]) -> List[ScriptLine]:
    """Number logical lines 1..N in order."""
    return [
        ScriptLine(line_number=no, content=ll.text)
        for no, ll in enumerate(logical_lines, start=1)
    ]
