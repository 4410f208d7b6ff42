"""
vocabulary.py

Static configuration for line classification.

Everything the classifier and merge resolver match against lives here:
header patterns, the character cue pattern, and the stage direction
vocabulary. All of it is compiled once at import time and bundled into
DEFAULT_CONFIG. Pass a different ClassifierConfig to classify()/should_merge()
to swap any of it out (tests, other script conventions).
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Tuple

# "ACT ONE", "Act II", "ACT 3:", "ACT 2B". Roman numerals and words must end on a
# word boundary so "Scene in the garden" does not match on the leading "i";
# digits may carry a letter suffix ("SCENE 12A").
ACT_HEADER_RE = re.compile(
    r"^ACT\s+(?:[IVX]+\b|\d+|ONE\b|TWO\b|THREE\b)",
    re.IGNORECASE,
)

SCENE_HEADER_RE = re.compile(
    r"^SCENE\s+(?:[IVX]+\b|\d+|ONE\b|TWO\b|THREE\b|FOUR\b|FIVE\b)",
    re.IGNORECASE,
)

# Uppercase ASCII letters, whitespace, periods and colons only ("JOHN:", "MRS. HALL.")
CHARACTER_NAME_RE = re.compile(r"^[A-Z\s.:]+$")

STAGE_DIRECTION_KEYWORDS: FrozenSet[str] = frozenset({
    # movement and positioning
    "enter", "enters", "exit", "exits", "cross", "crosses", "move", "moves",
    "he walks", "she walks", "he turns", "she turns", "he looks", "she looks",
    "he sits", "she sits", "he stands", "she stands", "he runs", "she runs",
    # stage positions
    "dsr", "dsl", "dcr", "dcl", "dc", "usr", "usl", "ucr", "ucl", "uc",
    "stage left", "stage right", "upstage", "downstage", "centre", "center",
    "down stage", "up stage", "down left", "down right", "up left", "up right",
    # technical, lighting, sound
    "lights", "light", "sound", "music", "fade", "blackout", "dim", "bright",
    "curtain", "scene change", "interval", "props", "costume", "set",
    "fx", "sfx", "lx", "follow spot", "spot", "cue",
    # actions and gestures
    "gesture", "gestures", "point", "points", "nod", "nods", "shake", "shakes",
    "laugh", "laughs", "cry", "cries", "shout", "shouts", "whisper", "whispers",
    "pause", "beat", "silence", "aside", "to audience", "fourth wall",
    # timing and delivery
    "meanwhile", "later", "earlier", "suddenly", "slowly", "quickly", "quietly",
    "loudly", "angrily", "sadly", "happily", "nervously", "confidently",
})

# Opening/closing pairs that mark a whole line as a direction.
WRAPPERS: Tuple[Tuple[str, str], ...] = (("(", ")"), ("[", "]"), ("*", "*"))

TERMINAL_PUNCTUATION: Tuple[str, ...] = (".", "!", "?")


def build_keyword_re(keywords: Iterable[str]) -> re.Pattern:
    """
    Compile one alternation that finds any keyword as a separate word.

    An empty vocabulary compiles to a pattern that never matches.
    """
    words = sorted({k.lower() for k in keywords if k.strip()}, key=lambda k: (-len(k), k))
    if not words:
        return re.compile(r"(?!x)x")
    alternation = "|".join(re.escape(w) for w in words)
    return re.compile(rf"(?<!\S)(?:{alternation})\b")


@dataclass(frozen=True)
class ClassifierConfig:
    act_re: re.Pattern = ACT_HEADER_RE
    scene_re: re.Pattern = SCENE_HEADER_RE
    character_re: re.Pattern = CHARACTER_NAME_RE
    # character cues must be strictly longer than min and strictly shorter than max
    character_min_len: int = 1
    character_max_len: int = 30
    keywords: FrozenSet[str] = STAGE_DIRECTION_KEYWORDS
    wrappers: Tuple[Tuple[str, str], ...] = WRAPPERS
    terminal_punctuation: Tuple[str, ...] = TERMINAL_PUNCTUATION
    short_fragment_len: int = 20
    keyword_prefixes: Tuple[str, ...] = field(init=False, repr=False, compare=False)
    keyword_re: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lowered = tuple(sorted({k.lower() for k in self.keywords if k.strip()}))
        object.__setattr__(self, "keyword_prefixes", lowered)
        object.__setattr__(self, "keyword_re", build_keyword_re(lowered))

    def with_keywords(self, keywords: Iterable[str]) -> "ClassifierConfig":
        return replace(self, keywords=frozenset(keywords))


DEFAULT_CONFIG = ClassifierConfig()
