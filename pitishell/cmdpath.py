"""Locating the program a command name refers to."""

from __future__ import annotations

import errno
import os
import stat

from pitishell.context import ShellContext, report
from pitishell.textutils import split


def _fail(ctx: ShellContext, code: int, message: str) -> None:
    ctx.exit_code = code
    report(message)
    ctx.exit()


def _check_explicit_path(ctx: ShellContext, path: str) -> str:
    try:
        info = os.stat(path)
    except OSError as exc:
        _fail(ctx, 127, f"{path}: {os.strerror(exc.errno or errno.ENOENT)}")
        raise
    if stat.S_ISDIR(info.st_mode):
        _fail(ctx, 126, f"{path}: Is a directory")
    if not os.access(path, os.X_OK):
        _fail(ctx, 126, f"{path}: {os.strerror(errno.EACCES)}")
    return path


def find_command_path(ctx: ShellContext, name: str | None) -> str | None:
    """Return the path of the program to run for ``name``.

    A name containing ``/``, or any name when ``PATH`` is unset, is taken
    as a path and must be an executable that is not a directory; otherwise
    ``ShellExit`` is raised (127 if missing, 126 otherwise). Other names are
    looked up in ``PATH``; when not found ``None`` is returned and the exit
    code is set to 127.
    """
    if name is None:
        return None
    path_value = ctx.env.get("PATH")
    if path_value is None or "/" in name:
        return _check_explicit_path(ctx, name)
    if not name:
        ctx.exit_code = 127
        return None
    for directory in split(path_value, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    ctx.exit_code = 127
    return None