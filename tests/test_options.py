import pytest

from wrapkit.line_ending import LineEnding
from wrapkit.options import Options, WordSplitter


def test_options_agree_with_int():
    opt_int = Options.coerce(42)
    opt_options = Options(42)
    assert opt_int.width == opt_options.width
    assert opt_int.initial_indent == opt_options.initial_indent
    assert opt_int.subsequent_indent == opt_options.subsequent_indent
    assert opt_int.break_words == opt_options.break_words
    assert opt_int.word_splitter.split_points(
        "hello-world"
    ) == opt_options.word_splitter.split_points("hello-world")


def test_defaults():
    options = Options(80)
    assert options.line_ending is LineEnding.LF
    assert options.initial_indent == ""
    assert options.subsequent_indent == ""
    assert options.break_words is True
    assert options.word_splitter is WordSplitter.HYPHEN_SPLITTER


def test_coerce_returns_existing_options():
    options = Options(10).with_initial_indent("> ")
    assert Options.coerce(options) is options


@pytest.mark.parametrize("value", ["10", 1.5, None, True])
def test_coerce_rejects_other_types(value):
    with pytest.raises(TypeError):
        Options.coerce(value)


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        Options(-1)


def test_builders_leave_original_unchanged():
    base = Options(15)
    changed = (
        base.with_width(20)
        .with_line_ending(LineEnding.CRLF)
        .with_initial_indent("- ")
        .with_subsequent_indent("  ")
        .with_break_words(False)
        .with_word_splitter(WordSplitter.NO_HYPHENATION)
    )
    assert base == Options(15)
    assert changed == Options(
        20,
        LineEnding.CRLF,
        "- ",
        "  ",
        False,
        WordSplitter.NO_HYPHENATION,
    )


def test_hyphen_splitter_split_points():
    assert WordSplitter.HYPHEN_SPLITTER.split_points("hello-world") == [6]
    assert WordSplitter.HYPHEN_SPLITTER.split_points("foo-bar-baz") == [4, 8]


def test_hyphen_splitter_ignores_unsurrounded_hyphens():
    assert WordSplitter.HYPHEN_SPLITTER.split_points("--foo-bar") == [6]
    assert WordSplitter.HYPHEN_SPLITTER.split_points("foo-") == []
    assert WordSplitter.HYPHEN_SPLITTER.split_points("a--b") == []


def test_no_hyphenation_split_points():
    assert WordSplitter.NO_HYPHENATION.split_points("foo-bar-baz") == []


def test_line_ending_strings():
    assert Options(5).with_line_ending(LineEnding.CRLF).line_ending.as_str() == "\r\n"