"""Syntax checks run on a line before it is expanded and parsed."""

from __future__ import annotations

from pitishell.context import ShellContext, report

_SPACES = "\t\n\v\f\r "


def quotes_balanced(text: str) -> bool:
    """Return True if every unescaped quote of the line is closed."""
    single = double = 0
    in_single = in_double = False
    previous = ""
    for char in text:
        escaped = previous == "\\"
        if char == "'" and not in_double and not escaped:
            single += 1
            in_single = not in_single
        elif char == '"' and not in_single and not escaped:
            double += 1
            in_double = not in_double
        previous = char
    return single % 2 == 0 and double % 2 == 0


def _update_quote(char: str, quote: str) -> str:
    if not quote and char in "'\"":
        return char
    if quote and char == quote:
        return ""
    return quote


def pipes_valid(text: str) -> bool:
    """Return True if no pipeline segment is empty and no quote is left open."""
    quote = ""
    pos = 0
    length = len(text)
    while True:
        while pos < length and text[pos] in _SPACES:
            pos += 1
        if pos == length:
            return False
        start = pos
        while pos < length:
            quote = _update_quote(text[pos], quote)
            if not quote and text[pos] == "|":
                break
            pos += 1
        if not text[start:pos].strip(_SPACES):
            return False
        if pos == length:
            break
        pos += 1
        if pos == length:
            return False
    return not quote


def redirections_valid(text: str) -> bool:
    """Return True if every redirection operator is followed by a word."""
    pos = 0
    length = len(text)
    while pos < length:
        if text[pos] not in "<>":
            pos += 1
            continue
        pos += 1
        if pos < length and text[pos] in "<>":
            pos += 1
        while pos < length and text[pos] == " ":
            pos += 1
        if pos == length or text[pos] == "|":
            return False
    return True


def is_syntax_valid(ctx: ShellContext, text: str) -> bool:
    """Check the line; on error report it, set exit code 2 and return False."""
    if not quotes_balanced(text):
        problem = "quote parity issue"
    elif "|" in text and not pipes_valid(text):
        problem = "pipe issue"
    elif not redirections_valid(text):
        problem = "angle bracket issue"
    else:
        return True
    ctx.exit_code = 2
    report(f"syntax: {problem}")
    return False