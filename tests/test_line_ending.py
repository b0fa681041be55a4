from wrapkit.line_ending import LineEnding, non_empty_lines


def test_as_str():
    assert LineEnding.CRLF.as_str() == "\r\n"
    assert LineEnding.LF.as_str() == "\n"


def test_non_empty_lines_full_case():
    assert list(non_empty_lines("LF\nCRLF\r\n\r\n\nunterminated")) == [
        ("LF", LineEnding.LF),
        ("CRLF", LineEnding.CRLF),
        ("unterminated", None),
    ]


def test_non_empty_lines_new_lines_only():
    assert next(non_empty_lines("\r\n\n\n\r\n"), None) is None


def test_non_empty_lines_no_input():
    assert list(non_empty_lines("")) == []


def test_non_empty_lines_lone_carriage_return_kept():
    assert list(non_empty_lines("a\rb\n")) == [("a\rb", LineEnding.LF)]


def test_non_empty_lines_single_unterminated():
    assert list(non_empty_lines("hello")) == [("hello", None)]