from dataclasses import dataclass

import pytest

from m173.commands import (
    Command,
    CommandFlags,
    CommandHandler,
    CommandResult,
    HelpCommand,
)


@dataclass
class FakePlayer:
    is_operator: bool = False


class Echo(Command):
    def __init__(self, name="echo", flags=CommandFlags.NONE):
        super().__init__(name, "Repeat the arguments", flags)
        self.calls = []

    def execute(self, caller, args):
        self.calls.append((caller, list(args)))
        return CommandResult(True, " ".join(args))


@pytest.fixture
def handler():
    return CommandHandler()


def test_flags():
    handler = CommandHandler()
    cmd = Echo(flags=CommandFlags.PLAYER_ONLY | CommandFlags.OPERATOR_ONLY)
    assert cmd.is_player_only() and cmd.is_operator_only()
    plain = Echo("plain")
    assert not plain.is_player_only() and not plain.is_operator_only()
    handler.register(cmd)
    handler.register(plain)
    assert handler.command_count_for(FakePlayer(False)) == 1


def test_can_be_used_by():
    handler = CommandHandler()
    cmd = Echo(flags=CommandFlags.OPERATOR_ONLY)
    assert cmd.can_be_used_by(None) is True
    assert cmd.can_be_used_by(FakePlayer(True)) is True
    assert cmd.can_be_used_by(FakePlayer(False)) is False
    handler.register(cmd)
    assert handler.execute(FakePlayer(False), "echo x").success is False


def test_names_equal_is_case_insensitive():
    assert Echo("Echo").is_names_equal(Echo("ECHO"))
    assert not Echo("echo").is_names_equal(Echo("other"))
    handler = CommandHandler()
    assert handler.register(Echo("Echo")) is True
    assert handler.register(Echo("eCHO")) is False


def test_register_rejects_duplicates(handler):
    assert handler.register(Echo("echo")) is True
    assert handler.register(Echo("ECHO")) is False
    assert len(handler) == 1


def test_unregister(handler):
    cmd = Echo()
    handler.register(cmd)
    assert handler.unregister(cmd) is True
    assert handler.unregister(cmd) is False
    assert len(handler) == 0
    assert handler.command_count_for(FakePlayer()) == 0


def test_execute_splits_arguments(handler):
    cmd = Echo()
    handler.register(cmd)
    result = handler.execute(None, "/ECHO a  b ")
    assert result == CommandResult(True, "a b")
    assert cmd.calls == [(None, ["a", "b"])]


def test_execute_without_slash_and_args(handler):
    cmd = Echo()
    handler.register(cmd)
    assert handler.execute(None, "echo").output == ""
    assert cmd.calls[0][1] == []


def test_unknown_command(handler):
    result = handler.execute(None, "/nope x")
    assert result.success is True
    assert result.output == '\u00a7cUnknown command\u00a7f: "nope"!'


def test_empty_line_raises(handler):
    with pytest.raises(ValueError):
        handler.execute(None, "")


def test_player_only_from_console(handler):
    handler.register(Echo(flags=CommandFlags.PLAYER_ONLY))
    result = handler.execute(None, "echo hi")
    assert result == CommandResult(False, "\u00a7cPlayer-only command!")
    assert handler.execute(FakePlayer(), "echo hi").output == "hi"


def test_operator_only(handler):
    handler.register(Echo(flags=CommandFlags.OPERATOR_ONLY))
    assert handler.execute(FakePlayer(False), "echo hi") == CommandResult(
        False, "\u00a7cPermission denied!"
    )
    assert handler.execute(FakePlayer(True), "echo hi").success is True
    assert handler.execute(None, "echo hi").success is True


def test_command_count_for(handler):
    handler.register(Echo("a"))
    handler.register(Echo("b", CommandFlags.OPERATOR_ONLY))
    assert handler.command_count_for(None) == 2
    assert handler.command_count_for(FakePlayer(True)) == 2
    assert handler.command_count_for(FakePlayer(False)) == 1


def test_gen_help_lists_usable_commands(handler):
    handler.register(Echo("a"))
    handler.register(Echo("b", CommandFlags.OPERATOR_ONLY))
    text = handler.gen_help(0, 10, FakePlayer(False))
    lines = text.split("\n")
    assert lines[0] == "Server commands help (page 1/1):"
    assert lines[1:] == ["  \u00a7e/a\u00a7f - Repeat the arguments"]
    assert "/b" in handler.gen_help(0, 10, None)


def test_gen_help_paging_and_clamping(handler):
    for name in ("a", "b", "c"):
        handler.register(Echo(name))
    first = handler.gen_help(0, 2, None).split("\n")
    assert len(first) == 3
    last = handler.gen_help(1, 2, None).split("\n")
    assert last[0] == "Server commands help (page 2/2):"
    assert len(last) == 2 and "/c" in last[1]
    assert handler.gen_help(50, 2, None) == handler.gen_help(1, 2, None)
    assert handler.gen_help(-5, 2, None) == handler.gen_help(0, 2, None)


def test_gen_help_rejects_bad_page_size(handler):
    with pytest.raises(ValueError):
        handler.gen_help(0, 0, None)


def test_help_command(handler):
    handler.register(HelpCommand(handler))
    handler.register(Echo())
    result = handler.execute(None, "/help")
    assert result.success is True
    assert result.output == handler.gen_help(0, 10, None)
    assert "/echo" in result.output
    assert handler.execute(None, "/help 99").output == handler.gen_help(98, 10, None)
    assert handler.execute(None, "/help abc").output == handler.gen_help(0, 10, None)