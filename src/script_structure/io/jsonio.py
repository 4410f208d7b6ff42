from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Any, Dict

from script_structure.models import Script, ScriptLine, Section, SectionType


def safe_write_json(path: str, obj: Dict[str, Any]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    tmp = path + ".tmp"
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2)
    os.replace(tmp, path)


def load_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def script_to_dict(script: Script) -> Dict[str, Any]:
    """Plain-dict form of a Script, as handed to storage or written to disk."""
    return {
        "id": script.id,
        "name": script.name,
        "dateAdded": script.created_at.isoformat(),
        "lines": [
            {"lineNumber": ln.line_number, "content": ln.content}
            for ln in script.lines
        ],
        "sections": [
            {
                "title": sec.title,
                "type": sec.type.value,
                "startLineNumber": sec.start_line_number,
            }
            for sec in script.sections
        ],
    }


def script_from_dict(obj: Dict[str, Any]) -> Script:
    """
    Rebuild a Script from script_to_dict() output.

    Raises:
        ValueError: a payload that is not a dict, missing keys, an unknown
            section type, line numbers that are not exactly 1..N, a section
            pointing past the last line, sections out of line order, or a
            section title that differs from the line it points at.
    """
    if not isinstance(obj, dict):
        raise ValueError(f"malformed script payload: expected a dict, got {type(obj).__name__}")
    try:
        lines = tuple(
            ScriptLine(line_number=int(d["lineNumber"]), content=str(d["content"]))
            for d in obj.get("lines", [])
        )
        sections = tuple(
            Section(
                title=str(d["title"]),
                type=SectionType(d["type"]),
                start_line_number=int(d["startLineNumber"]),
            )
            for d in obj.get("sections", [])
        )
        script = Script(
            id=str(obj["id"]),
            name=str(obj["name"]),
            created_at=datetime.fromisoformat(obj["dateAdded"]),
            lines=lines,
            sections=sections,
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed script payload: {exc!r}") from exc

    numbers = [ln.line_number for ln in lines]
    if numbers != list(range(1, len(lines) + 1)):
        raise ValueError("line numbers must run 1..N without gaps")
    for sec in sections:
        if not 1 <= sec.start_line_number <= len(lines):
            raise ValueError(f"section {sec.title!r} points at missing line {sec.start_line_number}")
        if sec.title != lines[sec.start_line_number - 1].content:
            raise ValueError(f"section {sec.title!r} does not match line {sec.start_line_number}")
    starts = [sec.start_line_number for sec in sections]
    if starts != sorted(starts):
        raise ValueError("sections must be in line order")
    return script


def dump_script(script: Script, path: str) -> None:
    safe_write_json(path, script_to_dict(script))


def load_script(path: str) -> Script:
    return script_from_dict(load_json(path))
