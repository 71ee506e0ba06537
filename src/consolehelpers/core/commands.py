"""
Commands understood by the list editor.

This module handles command recognition for the interactive list loop,
independent of the terminal. Both grammars are plain functions that get
everything they depend on, such as the current item count, as arguments.
"""
import enum

from consolehelpers.config import (ITEM_DELETE_COMMAND, ITEM_EDIT_COMMAND,
                                   ITEM_RETURN_COMMAND, LIST_ADD_COMMAND,
                                   LIST_CONTINUE_COMMAND,
                                   UNKNOWN_COMMAND_MESSAGE,
                                   UNKNOWN_ITEM_MESSAGE)
from consolehelpers.core.validation import (INTEGER_PATTERN, Accepted,
                                            Rejected, ValidationResult,
                                            is_numeric)


class ListCommand:
    """Base class for commands typed at the list prompt."""

    def __init__(self, text: str):
        self.text = text

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.text!r})"

    __repr__ = __str__


class AddItemCommand(ListCommand):
    """Command to append a new item."""
    pass


class ContinueCommand(ListCommand):
    """Command to leave the list editor."""
    pass


class SelectItemCommand(ListCommand):
    """Command to select an existing item by its 1-based number."""

    def __init__(self, text: str, number: int):
        super().__init__(text)
        self.number = number

    @property
    def index(self) -> int:
        """0-based position of the selected item."""
        return self.number - 1


class ItemAction(enum.Enum):
    """What to do with a selected item."""
    EDIT = ITEM_EDIT_COMMAND
    DELETE = ITEM_DELETE_COMMAND
    RETURN_TO_LIST = ITEM_RETURN_COMMAND


def parse_list_command(text: str, item_count: int) -> ValidationResult:
    """Parse an answer typed at the list prompt.

    Args:
        text: Normalized answer
        item_count: Number of items currently in the list

    Returns:
        Accepted with a ListCommand, or Rejected with the error to show
    """
    if is_numeric(text):
        if not INTEGER_PATTERN.fullmatch(text):
            return Rejected(UNKNOWN_ITEM_MESSAGE)
        number = int(text)
        if number < 1 or number > item_count:
            return Rejected(UNKNOWN_ITEM_MESSAGE)
        return Accepted(SelectItemCommand(text, number))

    if text == LIST_ADD_COMMAND:
        return Accepted(AddItemCommand(text))
    if text == LIST_CONTINUE_COMMAND:
        return Accepted(ContinueCommand(text))
    return Rejected(UNKNOWN_COMMAND_MESSAGE)


def parse_item_action(text: str) -> ValidationResult:
    """Parse an answer typed at the selected item prompt."""
    try:
        return Accepted(ItemAction(text))
    except ValueError:
        return Rejected(UNKNOWN_COMMAND_MESSAGE)


def list_command_descriptions(item_count: int) -> dict:
    """Commands available at the list prompt, with descriptions for completion."""
    descriptions = {
        LIST_ADD_COMMAND: "Add an item",
        LIST_CONTINUE_COMMAND: "Continue/validate the list",
    }
    for number in range(1, item_count + 1):
        descriptions[str(number)] = f"Edit or delete item {number}"
    return descriptions


ITEM_ACTION_DESCRIPTIONS = {
    ItemAction.EDIT.value: "Edit the item",
    ItemAction.DELETE.value: "Delete the item",
    ItemAction.RETURN_TO_LIST.value: "Return to the list",
}
