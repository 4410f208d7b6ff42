from script_structure.models import LineType, RawLine
from script_structure.pipeline.segmentation import number_lines, segment_lines
from script_structure.text.cleaners import split_raw_lines


def _raw(lines):
    return [RawLine(index=i, text=t) for i, t in enumerate(lines)]


SCENARIO_A = ["ACT ONE", "SCENE 1", "JOHN:", "Hello there", "how are you", "(pause)", "MARY:", "I am fine."]


def test_split_raw_lines_trims_and_drops_blanks():
    raw = split_raw_lines("  ACT ONE \r\n\n\t\nJOHN:\rHello there   \n")
    assert [r.text for r in raw] == ["ACT ONE", "JOHN:", "Hello there"]
    assert [r.index for r in raw] == [0, 1, 2]


def test_split_raw_lines_empty_input():
    assert split_raw_lines("") == []
    assert split_raw_lines(" \n\t\n ") == []


def test_scenario_a_logical_lines():
    out = segment_lines(_raw(SCENARIO_A))
    assert [ll.text for ll in out] == [
        "ACT ONE",
        "SCENE 1",
        "JOHN:",
        "Hello there how are you",
        "(pause)",
        "MARY:",
        "I am fine.",
    ]
    merged = [ll for ll in out if ll.merged]
    assert len(merged) == 1
    assert merged[0].raw_index == 3
    assert merged[0].line_type is LineType.DIALOGUE


def test_scenario_b_terminal_punctuation():
    out = segment_lines(_raw(["Hmm.", "What now?"]))
    assert [ll.text for ll in out] == ["Hmm.", "What now?"]
    assert all(ll.line_type is LineType.DIALOGUE for ll in out)


def test_scenario_d_wrapped_direction_stands_alone():
    out = segment_lines(_raw(["I was going", "*enters quietly*", "to say"]))
    assert [ll.text for ll in out] == ["I was going", "*enters quietly*", "to say"]
    assert out[1].line_type is LineType.STAGE_DIRECTION


def test_merge_consumes_next_line_once():
    # "b" is folded into "a"; "c" is then judged against "d", not against "b"
    out = segment_lines(_raw(["so then a", "b went home", "and c", "d too"]))
    assert [ll.text for ll in out] == ["so then a b went home", "and c d too"]


def test_headers_never_merged():
    lines = ["Hello", "ACT TWO", "and then", "SCENE 3", "JOHN:", "well"]
    out = segment_lines(_raw(lines))
    for ll in out:
        if ll.line_type in (LineType.ACT_HEADER, LineType.SCENE_HEADER, LineType.CHARACTER_NAME):
            assert not ll.merged
            assert ll.text in lines


def test_segmentation_is_deterministic():
    raw = _raw(SCENARIO_A * 3)
    assert segment_lines(raw) == segment_lines(raw)


def test_number_lines_is_contiguous():
    out = number_lines(segment_lines(_raw(SCENARIO_A)))
    assert [ln.line_number for ln in out] == list(range(1, len(out) + 1))


def test_empty_stream():
    assert segment_lines([]) == []
    assert number_lines([]) == []


def test_suffixed_scene_header_is_not_merged():
    out = segment_lines(_raw(["SCENE 12A", "begins here", "and goes on"]))
    assert out[0].text == "SCENE 12A"
    assert out[0].line_type is LineType.SCENE_HEADER
    assert not out[0].merged
