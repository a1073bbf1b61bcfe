import pytest

from RenderMark.inline_parser import parse_inline, scan_decorations
from RenderMark.model import (
    Bold,
    BoldItalic,
    Italic,
    LineBreak,
    PlainText,
    Strikethrough,
    Underlined,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("**bold**", [Bold("bold")]),
        ("*it*", [Italic("it")]),
        ("***x***", [BoldItalic("x")]),
        ("* spaced *", [Italic("spaced")]),
        (
            "_it_ and __b__ and ___bi___",
            [Italic("it"), PlainText(" and "), Bold("b"), PlainText(" and "), BoldItalic("bi")],
        ),
        ("~~gone~~ text", [Strikethrough("gone"), PlainText(" text")]),
        ("<u> under </u>!", [Underlined("under"), PlainText("!")]),
    ],
)
def test_decorations(text, expected):
    assert parse_inline(text) == expected


def test_mismatched_bold_falls_back_to_literal():
    assert parse_inline("**bold*") == [PlainText("**"), PlainText("bold"), PlainText("*")]


def test_unterminated_triple_run_is_not_retried_shorter():
    assert parse_inline("***x**") == [PlainText("***"), PlainText("x"), PlainText("**")]


def test_mixed_delimiters_do_not_match():
    assert parse_inline("*a_") == [PlainText("*"), PlainText("a"), PlainText("_")]


def test_emphasis_content_is_not_nested():
    assert parse_inline("**a *b* c**") == [Bold("a *b* c")]


def test_unterminated_strikethrough():
    assert parse_inline("~~no close") == [PlainText("~~"), PlainText("no close")]


def test_single_tilde_is_plain_text():
    assert parse_inline("a ~ b") == [PlainText("a "), PlainText("~ b")]


def test_unterminated_underline():
    assert parse_inline("<u>open") == [PlainText("<u>"), PlainText("open")]


def test_other_tags_are_plain_text():
    assert parse_inline("<b>x</b>") == [PlainText("<b>x"), PlainText("</b>")]


def test_special_characters_are_not_escaped():
    assert parse_inline('AT&T <3 "q"') == [PlainText("AT&T "), PlainText('<3 "q"')]


def test_trailing_double_space_break():
    assert parse_inline("line  ") == [PlainText("line"), LineBreak()]
    assert parse_inline("line   ") == [PlainText("line "), LineBreak()]


def test_trailing_backslash_break():
    assert parse_inline("line\\") == [PlainText("line"), LineBreak()]
    assert parse_inline("**b**\\") == [Bold("b"), LineBreak()]


def test_multiple_br_tags():
    assert parse_inline("a<br>b<br>c") == [
        PlainText("a"),
        LineBreak(),
        PlainText("b"),
        LineBreak(),
        PlainText("c"),
    ]


def test_br_segments_are_scanned_independently():
    assert parse_inline("*a<br>b*") == [PlainText("*"), PlainText("a"), LineBreak(), PlainText("b"), PlainText("*")]
    assert parse_inline("<br>") == [LineBreak()]


def test_trailing_break_is_checked_before_br():
    assert parse_inline("x<br>y  ") == [PlainText("x"), PlainText("<br>y"), LineBreak()]


def test_empty_text():
    assert parse_inline("") == []
    assert scan_decorations("") == []


def test_plain_text_round_trips():
    text = "nothing special here, just words (and punctuation)!"
    assert "".join(node.text for node in scan_decorations(text)) == text


def test_long_input_terminates():
    nodes = scan_decorations("*" * 5001 + "~" * 3001 + "<" * 2000 + "a" * 10000)
    assert nodes
    assert parse_inline("x" * 100000 + "<br>" * 500)[-1] == LineBreak()
