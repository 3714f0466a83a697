"""String splitting helpers used by the parser and the environment code."""

from __future__ import annotations


def update_quote_state(current: str, quote: str) -> str:
    """Return the quote state after reading ``current``.

    ``quote`` is the opening quote character currently in effect, or ``""``
    when outside quotes.
    """
    if current in ("'", '"'):
        if not quote:
            return current
        if quote == current:
            return ""
    return quote


def split(text: str, delims: str) -> list[str]:
    """Split ``text`` on any character of ``delims``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delims:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def split_first(text: str, delims: str) -> list[str]:
    """Split ``text`` at the first character found in ``delims`` only.

    A leading delimiter yields only the remainder; a text without delimiter
    yields itself; an empty text yields no word.
    """
    if not text:
        return []
    index = next((pos for pos, char in enumerate(text) if char in delims), None)
    if index is None:
        return [text]
    if index == 0:
        return [text[1:]]
    return [text[:index], text[index + 1 :]]


def split_quoted(text: str, delims: str) -> list[str]:
    """Split ``text`` on delimiters that are not inside quotes.

    Quotes are kept in the words; empty words are dropped.
    """
    words: list[str] = []
    current: list[str] = []
    quote = ""
    for char in text:
        if not quote and char in delims:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
        quote = update_quote_state(char, quote)
    if current:
        words.append("".join(current))
    return words