import pytest

from pitishell.textutils import split, split_first, split_quoted, update_quote_state


def test_split_drops_empty_words():
    assert split("a:b::c", ":") == ["a", "b", "c"]


def test_split_several_delimiters():
    assert split("ls  -l\t-a", " \t") == ["ls", "-l", "-a"]


@pytest.mark.parametrize("text", ["", ":::", ":"])
def test_split_no_words(text):
    assert split(text, ":") == []


@pytest.mark.parametrize("text", ["/bin:/usr/bin", "::x::y", "abc", "a:b:c:"])
def test_split_keeps_every_non_delimiter(text):
    words = split(text, ":")
    assert "".join(words) == text.replace(":", "")
    assert all(word and ":" not in word for word in words)


def test_split_first_only_first_delimiter():
    assert split_first("KEY=a=b", "=") == ["KEY", "a=b"]


def test_split_first_without_delimiter():
    assert split_first("KEY", "=") == ["KEY"]


def test_split_first_trailing_delimiter():
    assert split_first("KEY=", "=") == ["KEY", ""]


def test_split_first_leading_delimiter():
    assert split_first("=val", "=") == ["val"]


def test_split_first_empty():
    assert split_first("", "=") == []


def test_split_quoted_keeps_quoted_delimiters():
    line = 'echo "a|b" | cat'
    assert split_quoted(line, "|") == ['echo "a|b" ', " cat"]


def test_split_quoted_single_quotes():
    assert split_quoted("'|'", "|") == ["'|'"]


def test_split_quoted_drops_empty_words():
    assert split_quoted("a||b", "|") == ["a", "b"]


@pytest.mark.parametrize("line", ["ls | wc", "a|b|c", "x"])
def test_split_quoted_matches_split_without_quotes(line):
    assert split_quoted(line, "|") == split(line, "|")


@pytest.mark.parametrize(
    "current, quote, expected",
    [
        ("'", "", "'"),
        ('"', "", '"'),
        ("'", "'", ""),
        ('"', "'", "'"),
        ("a", '"', '"'),
        ("a", "", ""),
    ],
)
def test_update_quote_state(current, quote, expected):
    assert update_quote_state(current, quote) == expected