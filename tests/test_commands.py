from consolehelpers.core.commands import (AddItemCommand, ContinueCommand,
                                          ItemAction, SelectItemCommand,
                                          list_command_descriptions,
                                          parse_item_action,
                                          parse_list_command)
from consolehelpers.core.validation import Rejected


def test_letters():
    assert parse_list_command("a", 0).value == AddItemCommand("a")
    assert parse_list_command("c", 3).value == ContinueCommand("c")


def test_item_numbers_follow_item_count():
    for count in range(0, 5):
        accepted = [n for n in range(-2, 8) if parse_list_command(str(n), count).ok]
        assert accepted == list(range(1, count + 1))


def test_select_item():
    command = parse_list_command("2", 3).value
    assert command == SelectItemCommand("2", 2)
    assert command.index == 1


def test_empty_list_only_accepts_add_and_continue():
    assert parse_list_command("1", 0) == Rejected("Unknown item number")
    assert parse_list_command("a", 0).ok
    assert parse_list_command("c", 0).ok


def test_errors():
    assert parse_list_command("4", 3) == Rejected("Unknown item number")
    assert parse_list_command("0", 3) == Rejected("Unknown item number")
    assert parse_list_command("-1", 3) == Rejected("Unknown item number")
    assert parse_list_command("1.5", 3) == Rejected("Unknown item number")
    assert parse_list_command("x", 3) == Rejected("Unknown command")
    assert parse_list_command("A", 3) == Rejected("Unknown command")
    assert parse_list_command("", 3) == Rejected("Unknown command")


def test_item_actions():
    assert parse_item_action("e").value == ItemAction.EDIT
    assert parse_item_action("d").value == ItemAction.DELETE
    assert parse_item_action("l").value == ItemAction.RETURN_TO_LIST
    assert parse_item_action("x") == Rejected("Unknown command")
    assert parse_item_action("") == Rejected("Unknown command")


def test_descriptions():
    assert list(list_command_descriptions(2)) == ["a", "c", "1", "2"]
    assert list(list_command_descriptions(0)) == ["a", "c"]
