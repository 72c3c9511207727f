from enginecore.commands import CommandManager


def test_call_passes_arguments():
    manager = CommandManager()
    received = []
    manager.add_command("echo", "print args", received.append)
    assert manager.call_command("echo", ["a", "b"]) is True
    assert received == [["a", "b"]]


def test_call_unknown_returns_false():
    manager = CommandManager()
    assert manager.call_command("missing", []) is False


def test_description_lookup():
    manager = CommandManager()
    manager.add_command("help", "show help", lambda args: None)
    assert manager.get_description("help") == "show help"
    assert manager.get_description("nope") == ""


def test_duplicate_keeps_first():
    manager = CommandManager()
    calls = []
    manager.add_command("x", "first", lambda args: calls.append("first"))
    manager.add_command("x", "second", lambda args: calls.append("second"))
    manager.call_command("x", [])
    assert calls == ["first"]
    assert manager.get_description("x") == "first"


def test_get_commands_sorted():
    manager = CommandManager()
    for name in ["zeta", "alpha", "mid"]:
        manager.add_command(name, name, lambda args: None)
    assert manager.get_commands() == ["alpha", "mid", "zeta"]


def test_managers_are_independent():
    first = CommandManager()
    second = CommandManager()
    first.add_command("only", "here", lambda args: None)
    assert second.get_commands() == []