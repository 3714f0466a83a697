"""Expansion of ``$NAME`` and ``$?`` in command lines and here-documents."""

from __future__ import annotations

import enum
import string

from pitishell.context import ShellContext

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_?")


class ExpandMode(enum.Enum):
    """What the expanded text is."""

    HD = enum.auto()  # a here-document line
    CMD = enum.auto()  # a command line


def _char(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _is_blank(char: str) -> bool:
    return char in (" ", "\t")


def _is_word_char(char: str) -> bool:
    return char in _WORD_CHARS


def has_dollar_preceded_by_redir(text: str, index: int) -> bool:
    """Return True if the first ``$`` at or after ``index`` follows ``<<``.

    Blanks, quotes, backslashes and semicolons between ``<<`` and the
    ``$`` are ignored.
    """
    dollar = text.find("$", max(index, 0))
    if dollar == -1:
        return False
    j = dollar - 1
    while j >= 0 and (text[j] in "\\;'\"" or _is_blank(text[j])):
        j -= 1
    return j >= 1 and text[j] == "<" and text[j - 1] == "<"


def get_key_word(text: str) -> str | None:
    """Return the variable name following the ``$`` that starts ``text``.

    Returns ``None`` if ``text`` does not start with ``$`` or the ``$`` is
    last or followed by a blank.
    """
    following = _char(text, 1)
    if not following or _char(text, 0) != "$" or _is_blank(following):
        return None
    end = 1
    while end < len(text) and _is_word_char(text[end]):
        end += 1
    return text[1:end]


def _find_end_of_name(text: str, mode: ExpandMode) -> int:
    pos = 0
    while True:
        pos = text.find("$", pos)
        if pos == -1:
            return len(text)
        if mode is not ExpandMode.CMD or not has_dollar_preceded_by_redir(text, pos):
            pos += 1
            if _char(text, pos) == "?":
                return pos
            while pos < len(text) and _is_blank(text[pos]):
                pos += 1
            while pos < len(text) and _is_word_char(text[pos]):
                pos += 1
            return pos
        pos += 1


def _expanded_str(text: str, value: str | None, mode: ExpandMode) -> str:
    first = text.index("$")
    prefix = text[:first]
    if mode is ExpandMode.CMD and has_dollar_preceded_by_redir(text, first):
        return prefix + "$"
    rest = text[_find_end_of_name(text, mode) :]
    if rest.startswith("?"):
        rest = rest[1:]
    return prefix + (value or "") + rest


def _expand_word(text: str, index: int, ctx: ShellContext, mode: ExpandMode) -> str:
    if _char(text, index + 1) == "?":
        value: str | None = str(ctx.exit_code)
    else:
        value = ctx.env.get(get_key_word(text[index:]))
    return _expanded_str(text, value, mode)


def _find_expand_index(text: str) -> int | None:
    in_single = in_double = False
    for pos, char in enumerate(text):
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
        if not in_single and char == "$" and _char(text, pos + 1) not in ("", " "):
            return pos
    return None


def _expand_one(text: str, ctx: ShellContext, mode: ExpandMode) -> tuple[str, bool]:
    index = _find_expand_index(text)
    if index is None:
        return text, False
    if mode is ExpandMode.CMD and has_dollar_preceded_by_redir(text, index):
        if text.count("$") == 1:
            return text, False
        index += 1
        while index < len(text) and text[index] != "$":
            index += 1
    return _expand_word(text, index, ctx, mode), True


def expand_line(text: str | None, ctx: ShellContext, mode: ExpandMode) -> str | None:
    """Replace variables in ``text`` until nothing is left to expand.

    Variables in single quotes are kept; in command mode a here-document
    delimiter after ``<<`` is not expanded.
    """
    if text is None or "$" not in text:
        return text
    expanded = True
    while expanded:
        text, expanded = _expand_one(text, ctx, mode)
    return text