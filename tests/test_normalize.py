import pytest

from setlist_resolver.normalize import format_text


def test_trims_whitespace():
    assert format_text("  Dark Star \t") == "Dark Star"


def test_empty_string():
    assert format_text("") == ""


def test_whitespace_only():
    assert format_text("   \n ") == ""


def test_plain_text_unchanged():
    assert format_text("Dark Star") == "Dark Star"


# ---------------------------------------------------------------------------
# Bracket decoration
# ---------------------------------------------------------------------------


def test_strips_square_brackets():
    assert format_text("[Intro]") == "Intro"


def test_strips_lenticular_brackets():
    assert format_text("【Live】") == "Live"


def test_strips_brackets_after_trim():
    assert format_text("  [ Official ]  ") == "Official"


def test_empty_brackets():
    assert format_text("[]") == ""
    assert format_text("【】") == ""


def test_partial_brackets_kept():
    assert format_text("[Intro] Medley") == "[Intro] Medley"
    assert format_text("Medley [Intro]") == "Medley [Intro]"


def test_mismatched_styles_kept():
    assert format_text("[Live】") == "[Live】"
    assert format_text("【Live]") == "【Live]"


def test_strips_only_one_pair():
    assert format_text("[[Intro]]") == "[Intro]"


def test_strips_only_first_matching_style():
    assert format_text("[【Live】]") == "【Live】"


def test_single_bracket_characters():
    assert format_text("[") == "["
    assert format_text("]") == "]"


@pytest.mark.parametrize(
    "text",
    ["", "  ", "Dark Star", " [Intro] ", "【Live】", "[Intro] Medley", "A / B"],
)
def test_idempotent_without_nested_brackets(text):
    once = format_text(text)
    assert format_text(once) == once
