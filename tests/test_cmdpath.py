import os

import pytest

from pitishell.cmdpath import find_command_path
from pitishell.context import ShellContext, ShellExit


def _make_file(path, mode):
    path.write_text("#!/bin/sh\n")
    os.chmod(path, mode)
    return path


@pytest.fixture
def ctx():
    return ShellContext()


def test_found_in_path(ctx, tmp_path):
    _make_file(tmp_path / "tool", 0o755)
    ctx.env.set("PATH", f"/nonexistent:{tmp_path}")
    assert find_command_path(ctx, "tool") == f"{tmp_path}/tool"


def test_first_path_entry_wins(ctx, tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_file(first / "tool", 0o755)
    _make_file(second / "tool", 0o755)
    ctx.env.set("PATH", f"{first}:{second}")
    assert find_command_path(ctx, "tool") == f"{first}/tool"


def test_not_found_in_path(ctx, tmp_path):
    ctx.env.set("PATH", str(tmp_path))
    assert find_command_path(ctx, "missing") is None
    assert ctx.exit_code == 127


def test_empty_name(ctx, tmp_path):
    ctx.env.set("PATH", str(tmp_path))
    assert find_command_path(ctx, "") is None
    assert ctx.exit_code == 127


def test_none_name(ctx):
    assert find_command_path(ctx, None) is None


def test_explicit_executable(ctx, tmp_path):
    tool = _make_file(tmp_path / "tool", 0o755)
    ctx.env.set("PATH", "/nonexistent")
    assert find_command_path(ctx, str(tool)) == str(tool)


def test_explicit_directory(ctx, tmp_path, capsys):
    with pytest.raises(ShellExit) as info:
        find_command_path(ctx, str(tmp_path))
    assert info.value.code == 126
    assert f"{tmp_path}: Is a directory" in capsys.readouterr().err


def test_explicit_missing(ctx, tmp_path, capsys):
    missing = str(tmp_path / "missing")
    with pytest.raises(ShellExit) as info:
        find_command_path(ctx, missing)
    assert info.value.code == 127
    assert ctx.exit_code == 127
    assert f"{missing}: No such file or directory" in capsys.readouterr().err


def test_explicit_not_executable(ctx, tmp_path):
    plain = _make_file(tmp_path / "plain", 0o644)
    with pytest.raises(ShellExit) as info:
        find_command_path(ctx, str(plain))
    assert info.value.code == 126


def test_without_path_name_is_taken_as_path(ctx, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _make_file(tmp_path / "tool", 0o755)
    assert find_command_path(ctx, "tool") == "tool"
    with pytest.raises(ShellExit) as info:
        find_command_path(ctx, "absent")
    assert info.value.code == 127