import pytest

from pitishell.environment import Environment


@pytest.fixture
def env():
    return Environment()


def test_set_and_get(env):
    env.set("HOME", "/home/user")
    assert env.get("HOME") == "/home/user"


def test_get_missing_returns_none(env):
    assert env.get("NOPE") is None
    assert env.get(None) is None


def test_set_overwrites_existing_value(env):
    env.set("A", "1")
    env.set("A", "2")
    assert env.get("A") == "2"
    assert len(env) == 1


def test_set_none_keeps_existing_value(env):
    env.set("A", "1")
    env.set("A", None)
    assert env.get("A") == "1"


def test_new_key_without_value(env):
    env.set("EMPTY", None)
    assert "EMPTY" in env
    assert env.get("EMPTY") is None


def test_empty_key_is_ignored(env):
    env.set("", "x")
    assert len(env) == 0


def test_unset_removes_key(env):
    env.set("A", "1")
    env.set("B", "2")
    env.unset("A")
    assert "A" not in env
    assert list(env.items()) == [("B", "2")]


def test_unset_missing_key_leaves_env(env):
    env.set("A", "1")
    env.unset("B")
    env.unset(None)
    assert list(env.items()) == [("A", "1")]


def test_items_keep_insertion_order(env):
    for key in ("Z", "A", "M"):
        env.set(key, key.lower())
    assert [key for key, _ in env.items()] == ["Z", "A", "M"]


def test_update_does_not_move_variable(env):
    env.set("A", "1")
    env.set("B", "2")
    env.set("A", "3")
    assert list(env) == ["A", "B"]


def test_to_envp(env):
    env.set("A", "1")
    env.set("B", None)
    env.set("C", "x=y")
    assert env.to_envp() == ["A=1", "B=", "C=x=y"]


def test_to_envp_round_trip(env):
    env.set("PATH", "/bin:/usr/bin")
    env.set("USER", "someone")
    rebuilt = dict(entry.split("=", 1) for entry in env.to_envp())
    assert rebuilt == dict(env.items())