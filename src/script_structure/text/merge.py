"""
merge.py

Decides whether a raw line should be fused with the one after it.

PDF text extraction breaks long speeches wherever the page wrapped them, so
"Hello there" / "how are you" arrive as two lines. The resolver sees the
current line, its LineType and exactly one line of lookahead. It never
looks further ahead or behind.

Rules, in order:
  1) Headers and character cues on either side are hard boundaries.
  2) Stage directions on either side are always standalone.
  3) Two Dialogue lines:
       - current ends with . ! or ?  -> no merge
       - next starts lowercase        -> merge (continuation)
       - current shorter than 20 chars and next does not start
         uppercase                     -> merge (short fragment)
  4) Anything else -> no merge.

Rule 3's last two checks overlap: every lowercase start already triggers the
continuation rule, so the short-fragment rule only adds the case where the
next line opens with a digit, quote or other non-letter. Both are kept as
written until the intended behaviour is settled.
"""
from __future__ import annotations

from typing import Optional

from script_structure.models import LineType
from script_structure.text.classify import classify
from script_structure.text.vocabulary import DEFAULT_CONFIG, ClassifierConfig

BOUNDARY_TYPES = frozenset({
    LineType.ACT_HEADER,
    LineType.SCENE_HEADER,
    LineType.CHARACTER_NAME,
})


def should_merge(
    current: str,
    nxt: Optional[str],
    current_type: LineType,
    *,
    next_type: Optional[LineType] = None,
    config: ClassifierConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Return True if `nxt` should be appended to `current` as one logical line.

    Args:
        current: Text of the line under the cursor.
        nxt: Text of the following line, or None at end of stream.
        current_type: Classification of `current`.
        next_type: Classification of `nxt` if the caller already has it;
            computed with `config` otherwise.
        config: Classifier configuration (also supplies the terminal
            punctuation and short-fragment length).
    """
    if nxt is None:
        return False
    if next_type is None:
        next_type = classify(nxt, config=config)

    if current_type in BOUNDARY_TYPES or next_type in BOUNDARY_TYPES:
        return False

    if current_type is LineType.STAGE_DIRECTION or next_type is LineType.STAGE_DIRECTION:
        return False

    if current_type is LineType.DIALOGUE and next_type is LineType.DIALOGUE:
        cur = current.strip()
        first = nxt.strip()[:1]

        if cur.endswith(config.terminal_punctuation):
            return False

        if first.islower():
            return True

        if len(cur) < config.short_fragment_len and first and not first.isupper():
            return True

    return False
