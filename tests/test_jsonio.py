import json
from datetime import datetime, timezone

import pytest

from script_structure.io.jsonio import dump_script, load_script, script_from_dict, script_to_dict
from script_structure.pipeline.parse_script import parse_text

FIXED_TIME = datetime(2025, 6, 4, 12, 0, tzinfo=timezone.utc)


def _script():
    text = "ACT ONE\nSCENE 1\nJOHN:\nHello there\nhow are you\n(pause)\nMARY:\nI am fine.\n"
    return parse_text(text, "Scenario A", script_id="abc", created_at=FIXED_TIME)


def test_script_to_dict_shape():
    d = script_to_dict(_script())
    assert d["id"] == "abc"
    assert d["name"] == "Scenario A"
    assert d["dateAdded"] == "2025-06-04T12:00:00+00:00"
    assert d["lines"][3] == {"lineNumber": 4, "content": "Hello there how are you"}
    assert d["sections"] == [
        {"title": "ACT ONE", "type": "act", "startLineNumber": 1},
        {"title": "SCENE 1", "type": "scene", "startLineNumber": 2},
    ]


def test_dump_and_load(tmp_path):
    path = tmp_path / "processed" / "script.json"
    script = _script()
    dump_script(script, str(path))
    assert not (tmp_path / "processed" / "script.json.tmp").exists()
    assert json.loads(path.read_text(encoding="utf-8"))["id"] == "abc"
    assert load_script(str(path)) == script


def test_from_dict_rejects_gaps():
    d = script_to_dict(_script())
    d["lines"][2]["lineNumber"] = 9
    with pytest.raises(ValueError):
        script_from_dict(d)


def test_from_dict_rejects_dangling_section():
    d = script_to_dict(_script())
    d["sections"].append({"title": "SCENE 9", "type": "scene", "startLineNumber": 99})
    with pytest.raises(ValueError):
        script_from_dict(d)


@pytest.mark.parametrize("key", ["id", "name", "dateAdded"])
def test_from_dict_rejects_missing_keys(key):
    d = script_to_dict(_script())
    del d[key]
    with pytest.raises(ValueError):
        script_from_dict(d)


def test_from_dict_rejects_unknown_section_type():
    d = script_to_dict(_script())
    d["sections"][0]["type"] = "song_number"
    with pytest.raises(ValueError):
        script_from_dict(d)


def test_from_dict_rejects_sections_out_of_order():
    d = script_to_dict(_script())
    d["sections"].reverse()
    with pytest.raises(ValueError):
        script_from_dict(d)


def test_from_dict_rejects_title_that_differs_from_line():
    d = script_to_dict(_script())
    d["sections"][1]["title"] = "not the line"
    with pytest.raises(ValueError):
        script_from_dict(d)


@pytest.mark.parametrize("payload", [[], "script", None])
def test_from_dict_rejects_non_dict(payload):
    with pytest.raises(ValueError):
        script_from_dict(payload)
