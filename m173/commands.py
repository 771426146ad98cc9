"""Chat and console commands and the handler that dispatches them."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Iterator, Optional

from m173.helper import stricmp

__all__ = [
    "CommandFlags",
    "Command",
    "CommandResult",
    "CommandHandler",
    "HelpCommand",
]


class CommandFlags(IntFlag):
    NONE = 0
    PLAYER_ONLY = 1 << 0
    OPERATOR_ONLY = 1 << 1


@dataclass(frozen=True)
class CommandResult:
    """Whether a command succeeded and the text it replied with."""

    success: bool
    output: str = ""


class Command(ABC):
    """A named command; a caller of None stands for the server console."""

    def __init__(self, name: str, help_message: str, flags: CommandFlags = CommandFlags.NONE) -> None:
        self.name = name
        self.help_message = help_message
        self.flags = CommandFlags(flags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    @abstractmethod
    def execute(self, caller: Any, args: list[str]) -> CommandResult:
        """Run the command with its space-separated arguments."""

    def is_player_only(self) -> bool:
        return bool(self.flags & CommandFlags.PLAYER_ONLY)

    def is_operator_only(self) -> bool:
        return bool(self.flags & CommandFlags.OPERATOR_ONLY)

    def can_be_used_by(self, user: Any) -> bool:
        return not self.is_operator_only() or user is None or bool(user.is_operator)

    def is_names_equal(self, other: Command) -> bool:
        return other is self or stricmp(other.name, self.name)


class CommandHandler:
    """Keeps the registered commands and runs command lines against them."""

    def __init__(self) -> None:
        self._commands: list[Command] = []
        self._non_op_commands = 0

    def __iter__(self) -> Iterator[Command]:
        return iter(list(self._commands))

    def __len__(self) -> int:
        return len(self._commands)

    def register(self, command: Command) -> bool:
        """Add a command unless one with the same name exists."""
        if any(existing.is_names_equal(command) for existing in self._commands):
            return False
        if not command.is_operator_only():
            self._non_op_commands += 1
        self._commands.append(command)
        return True

    def unregister(self, command: Command) -> bool:
        """Remove a registered command."""
        for index, existing in enumerate(self._commands):
            if existing is command:
                if not existing.is_operator_only():
                    self._non_op_commands -= 1
                del self._commands[index]
                return True
        return False

    def execute(self, caller: Any, line: str) -> CommandResult:
        """Run a command line such as ``/give 1 64``."""
        if not line:
            raise ValueError("empty command line")
        if line[0] == "/":
            line = line[1:]
        name, _, rest = line.partition(" ")

        for command in self._commands:
            if not stricmp(command.name, name):
                continue
            if command.is_player_only() and caller is None:
                return CommandResult(False, "\u00a7cPlayer-only command!")
            if command.is_operator_only() and caller is not None and not caller.is_operator:
                return CommandResult(False, "\u00a7cPermission denied!")
            args = [arg for arg in rest.split(" ") if arg]
            return command.execute(caller, args)

        return CommandResult(True, f'\u00a7cUnknown command\u00a7f: "{name}"!')

    def command_count_for(self, user: Any) -> int:
        """How many commands the user may run."""
        if user is None or user.is_operator:
            return len(self._commands)
        return self._non_op_commands

    def gen_help(self, page: int, per_page: int, user: Any) -> str:
        """One page of help text, listing the commands the user may run."""
        if per_page < 1:
            raise ValueError("per_page must be positive")
        page_count = self.command_count_for(user) // per_page
        page = min(page_count, max(0, page))

        lines = [f"Server commands help (page {page + 1}/{page_count + 1}):"]
        usable = (command for command in self._commands if command.can_be_used_by(user))
        for index, command in enumerate(usable):
            if index < page * per_page:
                continue
            if index >= (page + 1) * per_page:
                break
            lines.append(f"  \u00a7e/{command.name}\u00a7f - {command.help_message}")
        return "\n".join(lines)


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class HelpCommand(Command):
    """Lists the available commands, ten per page."""

    PER_PAGE = 10

    def __init__(self, handler: CommandHandler) -> None:
        super().__init__("help", "Show this message")
        self._handler = handler

    def execute(self, caller: Any, args: list[str]) -> CommandResult:
        page = 0
        if args:
            match = _LEADING_INT.match(args[0])
            page = (int(match.group(1)) if match else 0) - 1
        return CommandResult(True, self._handler.gen_help(page, self.PER_PAGE, caller))