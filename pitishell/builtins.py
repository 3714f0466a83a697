"""Commands the shell runs itself: echo, cd, pwd, export, unset, env and exit."""

from __future__ import annotations

import os
import sys

from pitishell.context import ShellContext, ShellExit, report
from pitishell.textutils import split_first

BUILTINS = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})

_SPACES = " \t\n\r\f\v"
_DIGITS = "0123456789"
_ASCII_ALNUM = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)
_LONG_MAX = 2**63 - 1


def _out(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _strerror(exc: OSError) -> str:
    if exc.errno is not None:
        return os.strerror(exc.errno)
    return str(exc)


def is_builtin(name: str | None) -> bool:
    """Return True if ``name`` is one of the shell's own commands."""
    return name in BUILTINS


def _count_n_options(args: list[str]) -> int:
    count = 0
    for arg in args:
        body = arg[1:] if arg.startswith("-") else arg
        stripped = body.lstrip("n")
        if stripped or not arg:
            break
        count += 1
    return count


def echo(args: list[str] | None) -> int:
    """Print the arguments separated by spaces; leading ``-n`` options drop the newline."""
    if args is None:
        return 1
    options = _count_n_options(args)
    text = " ".join(args[options:])
    if not options:
        text += "\n"
    try:
        _out(text)
    except OSError as exc:
        report(f"write: {_strerror(exc)}")
        return 1
    return 0


def _change_directory(ctx: ShellContext, target: str) -> int:
    try:
        old = os.getcwd()
    except OSError as exc:
        report(f"cd: {_strerror(exc)}")
        return 1
    try:
        os.chdir(target)
    except OSError as exc:
        report(f"cd: {target}: {_strerror(exc)}")
        return 1
    try:
        new = os.getcwd()
    except OSError as exc:
        report(f"cd: {_strerror(exc)}")
        return 1
    ctx.env.set("PWD", new)
    ctx.env.set("OLDPWD", old)
    return 0


def cd(ctx: ShellContext, args: list[str] | None) -> int:
    """Change directory to the argument, to ``$HOME`` without one, or to ``$OLDPWD`` for ``-``.

    Updates ``PWD`` and ``OLDPWD``. Returns the exit status.
    """
    if args is None:
        return 1
    if len(args) > 1:
        report("cd: too many arguments")
        return 1
    if not args:
        target = ctx.env.get("HOME")
        if target is None:
            report("cd: HOME not set")
            return 1
    else:
        target = args[0]
    if target == "-":
        target = ctx.env.get("OLDPWD")
        if target is None:
            report("cd: PWD not set")
            return 1
        _out(target + "\n")
    return _change_directory(ctx, target)


def pwd(args: list[str] | None) -> int:
    """Print the current working directory."""
    if args is None:
        report(f"pwd: {os.strerror(22)}")
        return 1
    try:
        cwd = os.getcwd()
    except OSError as exc:
        report(f"pwd: {_strerror(exc)}")
        return 1
    _out(cwd + "\n")
    return 0


def _is_valid_identifier(arg: str) -> bool:
    if not arg or arg[0] in _DIGITS:
        return False
    name = arg.split("=", 1)[0]
    return bool(name) and all(char in _ASCII_ALNUM or char == "_" for char in name)


def _display_exported(ctx: ShellContext) -> None:
    lines = []
    for key, value in ctx.env.items():
        if value is None:
            lines.append(f"export {key}\n")
        else:
            lines.append(f'export {key}="{value}"\n')
    _out("".join(lines))


def export(ctx: ShellContext, args: list[str] | None) -> int:
    """Set variables given as ``NAME[=VALUE]``; list them all without arguments."""
    if args is None:
        return 1
    if not args:
        _display_exported(ctx)
    status = 0
    for arg in args:
        if not _is_valid_identifier(arg):
            report(f"export: `{arg}': not a valid identifier")
            status = 1
            continue
        parts = split_first(arg, "=")
        ctx.env.set(parts[0], parts[1] if len(parts) > 1 else None)
    return status


def unset(ctx: ShellContext, args: list[str] | None) -> int:
    """Remove the named variables."""
    for key in args or []:
        ctx.env.unset(key)
    return 0


def print_env(ctx: ShellContext) -> int:
    """Print every variable that has a value as ``NAME=VALUE``."""
    _out("".join(f"{key}={value}\n" for key, value in ctx.env.items() if value is not None))
    return 0


def parse_exit_code(text: str) -> int:
    """Parse an ``exit`` argument: blanks, an optional sign, then digits.

    Raises ``ValueError`` on trailing characters or a value outside the
    signed 64-bit range.
    """
    index = 0
    length = len(text)
    while index < length and text[index] in _SPACES:
        index += 1
    sign = 1
    if index < length and text[index] in "+-":
        if text[index] == "-":
            sign = -1
        index += 1
    result = 0
    overflow = False
    while index < length and text[index] in _DIGITS:
        result = result * 10 + int(text[index])
        if result > _LONG_MAX + (1 if sign < 0 else 0):
            overflow = True
        index += 1
    if overflow or index != length:
        raise ValueError(f"numeric argument required: {text!r}")
    return sign * result


def exit_builtin(ctx: ShellContext, args: list[str] | None) -> int:
    """Leave the shell with the given or the current exit code.

    Raises ``ShellExit``; returns 1 without leaving when given too many
    arguments.
    """
    if len(ctx.commands) == 1:
        sys.stderr.write("exit\n")
        sys.stderr.flush()
    if args:
        try:
            ctx.exit_code = parse_exit_code(args[0])
        except ValueError:
            report(f"exit: {args[0]}: numeric argument required")
            ctx.exit_code = 2
        else:
            if len(args) > 1:
                report("exit: too many arguments")
                ctx.exit_code = 1
                return 1
    ctx.exit_code %= 256
    raise ShellExit(ctx.exit_code)


def run_builtin(ctx: ShellContext, args: list[str]) -> int:
    """Run the builtin named by ``args[0]`` and store its status in ``ctx``."""
    name, rest = args[0], args[1:]
    if name == "echo":
        status = echo(rest)
    elif name == "cd":
        status = cd(ctx, rest)
    elif name == "pwd":
        status = pwd(rest)
    elif name == "export":
        status = export(ctx, rest)
    elif name == "unset":
        status = unset(ctx, rest)
    elif name == "env":
        status = print_env(ctx)
    elif name == "exit":
        status = exit_builtin(ctx, rest)
    else:
        raise ValueError(f"not a builtin: {name!r}")
    ctx.exit_code = status
    return status