import pytest

from script_structure.models import LineType
from script_structure.text.classify import classify
from script_structure.text.merge import should_merge


def _merge(cur, nxt):
    return should_merge(cur, nxt, classify(cur))


def test_lowercase_continuation_merges():
    assert _merge("Hello there", "how are you")


def test_terminal_punctuation_blocks_merge():
    assert not _merge("Hmm.", "what now?")
    assert not _merge("Really!", "and then")
    assert not _merge("Why?", "because")


def test_uppercase_next_does_not_merge():
    assert not _merge("I was thinking that maybe we", "Then again")


def test_short_fragment_with_non_letter_start_merges():
    assert _merge("Well I", "'cause you asked")
    assert _merge("I owe you", "50 pounds")


def test_long_line_with_non_letter_start_does_not_merge():
    assert not _merge("I was thinking that we could owe you", "50 pounds")


def test_end_of_stream():
    assert not should_merge("Hello there", None, LineType.DIALOGUE)


@pytest.mark.parametrize(
    "cur, nxt",
    [
        ("ACT ONE", "and so it begins"),
        ("SCENE 2", "somewhere dark"),
        ("JOHN:", "hello"),
        ("hello", "JOHN:"),
        ("hello", "ACT TWO"),
        ("hello", "Scene 3"),
    ],
)
def test_headers_and_cues_are_boundaries(cur, nxt):
    assert not _merge(cur, nxt)


@pytest.mark.parametrize(
    "cur, nxt",
    [
        ("(pause)", "and then"),
        ("Hello there", "(pause)"),
        ("Hello there", "*enters quietly*"),
        ("Hello", "slowly turning away"),
    ],
)
def test_stage_directions_stand_alone(cur, nxt):
    assert not _merge(cur, nxt)


def test_precomputed_next_type_is_used():
    # caller's classification wins over re-classifying
    assert not should_merge("Hello there", "how are you", LineType.DIALOGUE, next_type=LineType.CHARACTER_NAME)
    assert should_merge("Hello there", "how are you", LineType.DIALOGUE, next_type=LineType.DIALOGUE)


def test_empty_next_is_safe():
    assert not should_merge("Hello", "", LineType.DIALOGUE)


def test_short_fragment_length_boundary():
    nineteen = "I will give you all"
    twenty = "I will give you them"
    assert len(nineteen) == 19
    assert len(twenty) == 20
    assert _merge(nineteen, "2 pounds")
    assert not _merge(twenty, "2 pounds")
