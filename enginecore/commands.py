"""Registry of named console commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

CommandCallback = Callable[[list], None]


@dataclass(frozen=True)
class CommandHead:
    description: str
    callback: CommandCallback


class CommandManager:
    """Maps command names to descriptions and callbacks."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandHead] = {}

    def add_command(self, name: str, description: str, callback: CommandCallback) -> None:
        """Register a command; an existing command of the same name is kept."""
        self._commands.setdefault(name, CommandHead(description, callback))

    def call_command(self, name: str, args: Sequence[str]) -> bool:
        """Run the named command with ``args``; return False if it is unknown."""
        head = self._commands.get(name)
        if head is None:
            return False
        head.callback(list(args))
        return True

    def get_description(self, name: str) -> str:
        """Return the command's description, or an empty string if unknown."""
        head = self._commands.get(name)
        return head.description if head is not None else ""

    def get_commands(self) -> list[str]:
        """Return the registered command names in sorted order."""
        return sorted(self._commands)