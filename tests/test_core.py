import pytest

from wrapkit.core import (
    Fragment,
    Word,
    break_words,
    display_width,
    skip_ansi_escape_sequence,
)


def test_skip_ansi_escape_sequence_works():
    chars = iter("\x1b[34mHello\x1b[0m")
    ch = next(chars)
    assert skip_ansi_escape_sequence(ch, chars) is True
    assert next(chars) == "H"


def test_skip_ansi_escape_sequence_plain_char():
    chars = iter("bc")
    assert skip_ansi_escape_sequence("a", chars) is False
    assert next(chars) == "b"


def test_skip_operating_system_command_with_bel():
    chars = iter("]8;;link\x07rest")
    assert skip_ansi_escape_sequence("\x1b", chars) is True
    assert "".join(chars) == "rest"


def test_display_width_works():
    assert len("Café Plain".encode()) == 11
    assert display_width("Café Plain") == 10
    assert display_width("\x1b[31mCafé Rouge\x1b[0m") == 10
    assert (
        display_width("\x1b]8;;http://example.com\x1b\\This is a link\x1b]8;;\x1b\\")
        == 14
    )


def test_display_width_combining_characters():
    assert display_width("Cafe Plain") == 10
    assert display_width("Cafe\u0301 Plain") == 10


def test_display_width_narrow_emojis():
    assert display_width("⁉") == 1


def test_display_width_narrow_emojis_variant_selector():
    assert display_width("⁉\ufe0f") == 1


def test_display_width_emojis():
    assert display_width("😂😭🥺🤣✨😍🙏🥰😊🔥") == 20


def test_display_width_cjk():
    assert display_width("你好") == 4


def test_display_width_zero_width_joiner():
    assert display_width("👨\u200d🦰") == 4


@pytest.mark.parametrize("ch", ["#", "*", "0", "9", "©", "®"])
def test_ascii_and_latin1_emoji_chars_are_narrow(ch):
    assert display_width(ch) == 1


def test_word_from_text_splits_whitespace():
    word = Word.from_text("Hello!  ")
    assert word.word == "Hello!"
    assert word.whitespace == "  "
    assert word.penalty == ""
    assert word.width() == 6
    assert word.whitespace_width() == 2
    assert word.penalty_width() == 0
    assert str(word) == "Hello!"


def test_word_break_apart():
    assert list(Word.from_text("Hello!  ").break_apart(3)) == [
        Word.from_text("Hel"),
        Word.from_text("lo!  "),
    ]


def test_word_break_apart_keeps_penalty_on_last_piece():
    pieces = list(Word("abcde", " ", "-").break_apart(2))
    assert [p.word for p in pieces] == ["ab", "cd", "e"]
    assert [p.whitespace for p in pieces] == ["", "", " "]
    assert [p.penalty for p in pieces] == ["", "", "-"]


def test_word_break_apart_skips_escape_sequences():
    pieces = list(Word.from_text("\x1b[31mab\x1b[0m").break_apart(1))
    assert [p.word for p in pieces] == ["\x1b[31ma", "b\x1b[0m"]
    assert [p.width() for p in pieces] == [1.0, 1.0]


def test_word_break_apart_wide_chars():
    pieces = list(Word.from_text("你好").break_apart(1))
    assert [p.word for p in pieces] == ["你", "好"]
    assert [p.width() for p in pieces] == [2.0, 2.0]


def test_word_break_apart_empty_word():
    assert list(Word.from_text("").break_apart(3)) == []


def test_break_words_only_breaks_long_words():
    words = [Word.from_text("foo "), Word.from_text("barbaz")]
    result = break_words(words, 3)
    assert [w.word for w in result] == ["foo", "bar", "baz"]
    assert result[0].whitespace == " "


def test_break_words_pieces_fit():
    result = break_words([Word.from_text("abcdefghij")], 4)
    assert all(w.width() <= 4 for w in result)
    assert "".join(w.word for w in result) == "abcdefghij"


def test_fragment_is_abstract():
    with pytest.raises(TypeError):
        Fragment()


def test_incomplete_fragment_subclass_cannot_be_used():
    class Partial(Fragment):
        def width(self):
            return 1.0

    with pytest.raises(TypeError):
        break_words([Partial()], 3)


def test_custom_fragment_alongside_words():
    class Box(Fragment):
        def width(self):
            return 2.5

        def whitespace_width(self):
            return 1.0

        def penalty_width(self):
            return 0.0

    fragments = [Word.from_text("ab  "), Box(), Word("cd", "", "-")]
    total = sum(f.width() + f.whitespace_width() for f in fragments)
    assert total == 4.0 + 3.5 + 2.0
    assert [f.penalty_width() for f in fragments] == [0, 0.0, 1]