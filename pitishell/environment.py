"""Ordered store of the shell's environment variables."""

from __future__ import annotations

from collections.abc import Iterator


class Environment:
    """Environment variables kept in insertion order.

    A variable may exist without a value (``export NAME``); such a variable
    has the value ``None``.
    """

    def __init__(self) -> None:
        self._vars: dict[str, str | None] = {}

    def set(self, key: str, value: str | None) -> None:
        """Create ``key`` or update its value.

        Setting an existing variable to ``None`` leaves its value unchanged.
        """
        if not key:
            return
        if key in self._vars and value is None:
            return
        self._vars[key] = value

    def get(self, key: str | None) -> str | None:
        """Return the value of ``key``, or ``None`` if unset or valueless."""
        if key is None:
            return None
        return self._vars.get(key)

    def unset(self, key: str | None) -> None:
        """Remove ``key`` if it exists."""
        if key is None:
            return
        self._vars.pop(key, None)

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        yield from self._vars.items()

    def to_envp(self) -> list[str]:
        """Return the variables as ``KEY=VALUE`` strings for a child process."""
        return [f"{key}={value if value is not None else ''}" for key, value in self._vars.items()]

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)