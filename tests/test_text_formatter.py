import os

import pytest

from wormhole_config import text_formatter
from wormhole_config.text_formatter import break_text, echo, get_terminal_width


@pytest.mark.parametrize("width", [0, -1, -80])
def test_non_positive_width_returns_text_unchanged(width: int) -> None:
    text = "This is a test\n  with   odd spacing "
    assert break_text(text, width) == text


def test_empty_and_short_input() -> None:
    assert break_text("", 60) == ""
    assert break_text("test", 60) == "test"


def test_long_text_lines_respect_width() -> None:
    text = "This is a very long line that should be broken into multiple lines"
    result = break_text(text, 20)

    assert result == "This is a very\nlong line that\nshould be broken\ninto multiple lines"
    assert all(len(line) <= 20 for line in result.split("\n"))


def test_ordinary_words_are_not_hyphenated() -> None:
    result = break_text("This is a test of word boundaries", 15)

    assert result == "This is a\ntest of word\nboundaries"
    assert "-" not in result


def test_explicit_newlines_are_preserved() -> None:
    assert break_text("a\nb", 60) == "a\nb"
    assert break_text("Line one\nLine two", 60) == "Line one\nLine two"
    assert break_text("\n\nTitle", 60) == "\n\nTitle"


def test_indentation_carries_over_to_continuation_lines() -> None:
    result = break_text("  indented text that wraps around", 15)

    assert result == "  indented\n  text that\n  wraps around"


def test_indentation_resets_after_newline() -> None:
    result = break_text("  first\nsecond line that wraps", 12)

    lines = result.split("\n")
    assert lines[0] == "  first"
    assert all(not line.startswith(" ") for line in lines[1:])


def test_unusually_long_word_is_hyphenated() -> None:
    result = break_text("ab " + "x" * 20, 15)

    assert result == "ab xxxxxxxxxxx-\nxxxxxxxxx"
    assert all(len(line) <= 15 for line in result.split("\n"))


def test_pathological_run_spans_lines_and_keeps_content() -> None:
    run = "x" * 100
    result = break_text(run, 30)
    lines = result.split("\n")

    assert len(lines) > 1
    rebuilt = "".join(line[:-1] if line.endswith("-") else line for line in lines)
    assert rebuilt == run


def test_numeric_tokens_are_never_hyphenated() -> None:
    result = break_text("ab " + "1" * 20, 15)

    assert "-" not in result
    assert result.split("\n")[-1] == "1" * 20


def test_default_width_is_sixty() -> None:
    result = break_text("a" * 100)

    assert len(result.split("\n")) > 1
    assert break_text("word " * 30) == break_text("word " * 30, 60)


def test_prose_lines_stay_within_width() -> None:
    text = (
        "Validate your configuration to ensure it meets Wormhole deployment requirements. "
        "This checks that deployment modes are correctly set (either all BURNING, or exactly "
        "one LOCKING with the rest BURNING) and that all required fields are present."
    )
    for width in (20, 40, 72):
        lines = break_text(text, width).split("\n")
        assert all(len(line) <= width for line in lines)


def test_terminal_width_reads_columns(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COLUMNS", "132")

    assert get_terminal_width() == 132


def test_terminal_width_falls_back_to_eighty(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_terminal(*_args):
        raise OSError("not a terminal")

    monkeypatch.delenv("COLUMNS", raising=False)
    monkeypatch.setattr(os, "get_terminal_size", no_terminal)

    assert get_terminal_width() == 80


def test_terminal_width_ignores_zero_columns(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        text_formatter.shutil, "get_terminal_size", lambda *_args: os.terminal_size((0, 24))
    )

    assert get_terminal_width() == 80


def test_echo_wraps_and_keeps_trailing_newlines(capsys: pytest.CaptureFixture[str]) -> None:
    echo("This is a test of word boundaries\n", 15)

    assert capsys.readouterr().out == "This is a\ntest of word\nboundaries\n\n"


def test_echo_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    echo("Error: boom", 60, err=True)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: boom\n"


def test_byte_order_mark_is_a_break_and_trimmed() -> None:
    assert break_text("aaa" + chr(0xFEFF) + "bbb", 5) == "aaa\nbbb"


def test_information_separator_does_not_break_a_word() -> None:
    token = "aaa" + chr(0x1F) + "bbb"

    assert break_text(token, 5).split("\n")[-1] == token
    assert break_text("ab" + chr(0x1F), 60) == "ab" + chr(0x1F)
