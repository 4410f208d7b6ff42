"""
classify.py

This module assigns every line of script text one of five LineType tags.

Purpose in the pipeline
-----------------------
Text pulled out of a theatre script has no markup. A line can be:

    - an ACT header ("ACT ONE", "Act II")
    - a SCENE header ("SCENE 3", "Scene Four")
    - a CHARACTER cue ("JOHN:", "MRS. HALL.")
    - a STAGE DIRECTION ("(pause)", "[Lights fade]", "*exits*", "Slowly rises")
    - DIALOGUE (everything else)

Checks run in exactly that order and the first match wins. Anything that
fails every specific check is Dialogue; that default is expected, not an
error.

This module is deterministic and keeps no state. The patterns and
vocabulary come from a ClassifierConfig (see vocabulary.py).
"""
from __future__ import annotations

from script_structure.models import LineType
from script_structure.text.vocabulary import DEFAULT_CONFIG, ClassifierConfig


def is_act_header(s: str, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    return bool(config.act_re.match(s.strip()))


def is_scene_header(s: str, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    return bool(config.scene_re.match(s.strip()))


def is_character_name(s: str, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    """
    Short all-caps line made of letters, spaces, periods and colons.

    Known limitation: short shouted dialogue such as "NO." or "STOP:" looks
    exactly like a cue and is classified as one.
    """
    s = s.strip()
    if not config.character_min_len < len(s) < config.character_max_len:
        return False
    if not config.character_re.match(s):
        return False
    ends_like_cue = s.endswith(".") or s.endswith(":")
    has_lowercase = any(c.islower() for c in s)
    return ends_like_cue or not has_lowercase


def is_wrapped_direction(s: str, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    s = s.strip()
    return any(s.startswith(open_) and s.endswith(close) for open_, close in config.wrappers)


def has_direction_keyword(s: str, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    low = s.strip().lower()
    if low.startswith(config.keyword_prefixes):
        return True
    return config.keyword_re.search(low) is not None


def is_stage_direction(s: str, config: ClassifierConfig = DEFAULT_CONFIG) -> bool:
    return is_wrapped_direction(s, config) or has_direction_keyword(s, config)


def classify(text: str, *, config: ClassifierConfig = DEFAULT_CONFIG) -> LineType:
    """
    Classify one line of script text.

    Total over any string: empty or odd input simply falls through to
    Dialogue.
    """
    s = text.strip()
    if is_act_header(s, config):
        return LineType.ACT_HEADER
    if is_scene_header(s, config):
        return LineType.SCENE_HEADER
    if is_character_name(s, config):
        return LineType.CHARACTER_NAME
    if is_stage_direction(s, config):
        return LineType.STAGE_DIRECTION
    return LineType.DIALOGUE
