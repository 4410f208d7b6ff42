"""
structure.py

Derives Act/Scene section markers from a finished, numbered line sequence.

The output is flat and in line order: Scenes are not nested under Acts.
Anyone who needs a tree can rebuild it from `type` and `start_line_number`.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from script_structure.models import LineType, ScriptLine, Section, SectionType
from script_structure.text.classify import classify
from script_structure.text.vocabulary import DEFAULT_CONFIG, ClassifierConfig

SECTION_TYPE_BY_LINE_TYPE = {
    LineType.ACT_HEADER: SectionType.ACT,
    LineType.SCENE_HEADER: SectionType.SCENE,
}


def extract_sections(
    lines: Sequence[ScriptLine],
    line_types: Optional[Sequence[LineType]] = None,
    *,
    config: ClassifierConfig = DEFAULT_CONFIG,
) -> List[Section]:
    """
    Emit one Section per Act or Scene header line.

    Args:
        lines: Numbered script lines, in order.
        line_types: Classifications cached from the segmentation pass, one per
            line. If omitted, each line's content is classified again.
        config: Used only when re-classifying.

    Returns:
        Sections in non-decreasing start_line_number order. Each title is
        exactly the content of the line it points at.
    """
    if line_types is not None and len(line_types) != len(lines):
        raise ValueError(f"got {len(line_types)} line types for {len(lines)} lines")

    sections: List[Section] = []
    for idx, line in enumerate(lines):
        lt = line_types[idx] if line_types is not None else classify(line.content, config=config)
        section_type = SECTION_TYPE_BY_LINE_TYPE.get(lt)
        if section_type is None:
            continue
        sections.append(
            Section(
                title=line.content,
                type=section_type,
                start_line_number=line.line_number,
            )
        )
    return sections
