"""Shared shell state, command structures and error reporting."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass, field

from pitishell.environment import Environment

_PREFIX = "pitishell: "
_BUFFER_LIMIT = 1023


class RedirType(enum.Enum):
    """Kind of a redirection."""

    IN = enum.auto()  # <
    HEREDOC = enum.auto()  # <<
    APPEND = enum.auto()  # >>
    OUT = enum.auto()  # >
    HEREDOC_NO_INTER = enum.auto()  # << "eof": no expansion


@dataclass
class Redirect:
    """One redirection of a command, with the descriptors opened for it."""

    redir_type: RedirType
    filename: str | None = None
    fd_in: int | None = None
    fd_out: int | None = None


@dataclass
class Command:
    """One command of a pipeline."""

    args: list[str] = field(default_factory=list)
    redirects: list[Redirect] = field(default_factory=list)
    pid: int | None = None


class ShellExit(Exception):
    """Raised to leave the shell (or a forked child) with an exit code."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def _close_fd(fd: int | None) -> None:
    if fd is not None and fd > 2:
        try:
            os.close(fd)
        except OSError:
            pass


@dataclass
class ShellContext:
    """Everything the shell carries from one line to the next."""

    env: Environment = field(default_factory=Environment)
    commands: list[Command] = field(default_factory=list)
    exit_code: int = 0
    heredoc_pid: int | None = None
    line: str | None = None
    pipe_read: int | None = None
    pipe_write: int | None = None
    prev_pipe_read: int | None = None
    saved_stdin: int | None = None
    saved_stdout: int | None = None

    def exit(self) -> None:
        """Leave with the current exit code."""
        raise ShellExit(self.exit_code)

    def reset_commands(self) -> None:
        """Close the commands' redirections and forget the current line."""
        for command in self.commands:
            for redirect in command.redirects:
                _close_fd(redirect.fd_in)
                _close_fd(redirect.fd_out)
                redirect.fd_in = None
                redirect.fd_out = None
        self.commands = []
        self.line = None


def format_message(message: str) -> str:
    """Prefix ``message`` with the shell name, bounded to the buffer size."""
    return (_PREFIX + message)[:_BUFFER_LIMIT]


def report(message: str) -> None:
    """Write a prefixed error line to standard error."""
    sys.stderr.write(format_message(message) + "\n")
    sys.stderr.flush()