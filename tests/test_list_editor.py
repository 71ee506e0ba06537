import pytest

from consolehelpers.core.exceptions import (MissingInputError,
                                            TooManyInvalidAttemptsError)
from consolehelpers.interfaces.list_editor import EditorState, ListEditor


def test_scenario_add_add_delete(helper, channel):
    channel.answers = ["a", "first", "a", "second", "1", "d", "c"]
    assert helper.ask_list("Values", "Value") == ["second"]
    assert channel.answers == []


def test_continue_right_away(helper, channel):
    channel.answers = ["c"]
    assert helper.ask_list("Values", "Value", ["x", "y"]) == ["x", "y"]


def test_display(helper, channel):
    channel.answers = ["c"]
    helper.ask_list("Servers", "Server name", ["alpha", "beta"])
    assert channel.lines == [
        "",
        "Servers",
        "1. alpha",
        "2. beta",
        "",
        "Type an item number to edit or delete, or 'a' to add an item, or 'c' to continue/validate.",
    ]
    assert channel.prompts == ["Your choice > "]


def test_display_empty_list(helper, channel):
    channel.answers = ["c"]
    helper.ask_list("Servers", "Server name")
    assert channel.lines == [
        "",
        "Servers",
        "  Empty list",
        "",
        "Type 'a' to add an item, or 'c' to continue/validate.",
    ]


def test_caller_list_is_not_modified(helper, channel):
    items = ["x"]
    channel.answers = ["a", "y", "c"]
    assert helper.ask_list("Values", "Value", items) == ["x", "y"]
    assert items == ["x"]


def test_add_then_edit(helper, channel):
    channel.answers = ["a", "X", "2", "e", "Y", "c"]
    assert helper.ask_list("Values", "Value", ["first"]) == ["first", "Y"]
    assert "Value (default is 'X') > " in channel.prompts


def test_edit_hint_shows_trimmed_value(helper, channel):
    channel.answers = ["1", "e", "", "c"]
    assert helper.ask_list("Values", "Value", [" x "]) == ["x"]
    assert "Value (default is 'x') > " in channel.prompts


def test_empty_answers_do_not_change_the_list(helper, channel):
    channel.answers = ["a", "", "a", "   ", "1", "e", "", "1", "e", "  ", "c"]
    assert helper.ask_list("Values", "Value", ["keep"]) == ["keep"]


def test_return_to_list_does_not_mutate(helper, channel):
    channel.answers = ["2", "l", "1", "", "c"]
    assert helper.ask_list("Values", "Value", ["x", "y"]) == ["x", "y"]
    # The list is shown again after each item prompt
    assert channel.lines.count("Values") == 3


def test_delete_shifts_following_items(helper, channel):
    channel.answers = ["2", "d", "c"]
    assert helper.ask_list("Values", "Value", ["a", "b", "c", "d"]) == ["a", "c", "d"]


def test_invalid_commands_are_asked_again_without_redisplay(helper, channel):
    channel.answers = ["3", "x", "1", "z", "d", "c"]
    assert helper.ask_list("Values", "Value", ["a", "b"]) == ["b"]
    assert "Unknown item number" in channel.lines
    assert channel.lines.count("Unknown command") == 2
    # Shown once at start and once after the deletion
    assert channel.lines.count("Values") == 2


def test_empty_list_rejects_item_numbers(helper, channel):
    channel.answers = ["1", "c"]
    assert helper.ask_list("Values", "Value") == []
    assert channel.lines.count("Unknown item number") == 1


def test_item_numbers_follow_current_length(helper, channel):
    channel.answers = ["a", "x", "a", "y", "2", "d", "2", "c"]
    assert helper.ask_list("Values", "Value") == ["x"]
    assert "Unknown item number" in channel.lines


def test_too_many_invalid_commands(helper, channel):
    channel.answers = ["?"] * 10
    with pytest.raises(TooManyInvalidAttemptsError):
        helper.ask_list("Values", "Value")


def test_never_terminates_without_continue(helper, channel):
    channel.answers = ["a", "x", "1", "l"]
    with pytest.raises(MissingInputError):
        helper.ask_list("Values", "Value")


def test_states(helper, channel):
    editor = ListEditor(helper, "Values", "Value", ["x"])
    assert editor.state == EditorState.DISPLAYING

    channel.answers = ["1", "e", "y", "c"]
    assert editor.run() == ["y"]
    assert editor.state == EditorState.TERMINATED
    assert editor.selected is None


def test_item_prompt(helper, channel):
    channel.answers = ["1", "l", "c"]
    helper.ask_list("Values", "Value", ["x"])
    assert channel.prompts[1] == (
        "Do you want to edit (e) or to delete (d), or return to the list (l, default) > "
    )
