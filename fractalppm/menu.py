"""Named menu actions with their descriptions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Action = Callable[[Any], None]


class MenuData:
    """Actions registered by name, in the order they were added."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._functions: dict[str, Action] = {}
        self._descriptions: dict[str, str] = {}

    def add_action(self, name: str, func: Action, description: str) -> None:
        """Register func under name with a description."""
        self._names.append(name)
        self._functions[name] = func
        self._descriptions[name] = description

    @property
    def names(self) -> tuple[str, ...]:
        """Names in the order they were added."""
        return tuple(self._names)

    def get_function(self, name: str) -> Action | None:
        """The action registered under name, or None."""
        return self._functions.get(name)

    def get_description(self, name: str) -> str:
        """The description of name, or an empty string."""
        return self._descriptions.get(name, "")

    def sorted_descriptions(self) -> list[tuple[str, str]]:
        """(name, description) pairs sorted by name."""
        return sorted(self._descriptions.items())