"""
Data models for the script structure extractor.

RawLine and LogicalLine only live for the duration of one parse.
ScriptLine, Section and Script are the frozen output handed to whatever
stores the parsed script.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Tuple


class LineType(str, Enum):
    """Classification tag for one line of script text."""
    ACT_HEADER = "act_header"
    SCENE_HEADER = "scene_header"
    CHARACTER_NAME = "character_name"
    STAGE_DIRECTION = "stage_direction"
    DIALOGUE = "dialogue"


class SectionType(str, Enum):
    ACT = "act"
    SCENE = "scene"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class RawLine:
    """A trimmed, non-empty line and its 0-based position in the normalized stream."""
    index: int
    text: str


@dataclass(frozen=True)
class LogicalLine:
    """
    text: one raw line verbatim, or two raw lines joined by a single space
    line_type: classification of the first raw line (cached for structure extraction)
    raw_index: index of the first raw line consumed
    merged: True if the next raw line was folded in
    """
    text: str
    line_type: LineType
    raw_index: int
    merged: bool = False


@dataclass(frozen=True)
class ScriptLine:
    line_number: int          # 1-indexed, contiguous
    content: str

    def words(self) -> List[str]:
        """Split content on single spaces; runs of spaces give empty entries, as extracted."""
        return self.content.split(" ")


@dataclass(frozen=True)
class Section:
    """An Act or Scene marker anchored to the line that opens it."""
    title: str
    type: SectionType
    start_line_number: int


@dataclass(frozen=True)
class Script:
    id: str
    name: str
    created_at: datetime
    lines: Tuple[ScriptLine, ...] = field(default_factory=tuple)
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    def line(self, line_number: int) -> ScriptLine:
        """Look up a line by its 1-indexed number."""
        if not 1 <= line_number <= len(self.lines):
            raise IndexError(f"line_number {line_number} outside 1..{len(self.lines)}")
        return self.lines[line_number - 1]
