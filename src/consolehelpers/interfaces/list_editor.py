"""
Copyright (c) 2025 Jakob Bolliger

This file is part of ConsoleHelpers.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Interactive list editor.

This module provides the ListEditor class: it shows a list of values, then
lets the user add, edit and delete items with one-letter commands until the
user types 'c' to continue.
"""
import enum
from functools import partial
from typing import Iterable, List, Optional

from consolehelpers.config import (EMPTY_LIST_TEXT, INPUT_MARKER,
                                   ITEM_DELETE_COMMAND,
                                   ITEM_EDIT_COMMAND, ITEM_RETURN_COMMAND,
                                   LIST_ADD_COMMAND, LIST_CHOICE_QUESTION,
                                   LIST_CONTINUE_COMMAND)
from consolehelpers.core.commands import (ITEM_ACTION_DESCRIPTIONS,
                                          AddItemCommand, ContinueCommand,
                                          ItemAction, ListCommand,
                                          SelectItemCommand,
                                          list_command_descriptions,
                                          parse_item_action,
                                          parse_list_command)
from consolehelpers.core.validation import normalize
from consolehelpers.interfaces.prompter import Prompter, Question
from consolehelpers.ui.resources import command_fragment, question_fragments
from consolehelpers.utils.logging_config import get_logger


class EditorState(enum.Enum):
    """States of the list editor loop."""
    DISPLAYING = "displaying"
    AWAITING_TOP_COMMAND = "awaiting_top_command"
    AWAITING_ITEM_COMMAND = "awaiting_item_command"
    TERMINATED = "terminated"


class ListEditor:
    """Edits a list of values interactively."""

    def __init__(self, prompter: Prompter, title: str, item_message: str,
                 items: Optional[Iterable[str]] = None):
        """Initialize the editor.

        Args:
            prompter: Prompter used to ask every question
            title: Title shown above the list
            item_message: Question asked for the value of a new or edited item
            items: Starting values; the caller's sequence is not modified
        """
        self.prompter = prompter
        self.channel = prompter.channel
        self.title = title
        self.item_message = item_message
        self.items: List[str] = list(items or [])

        self.state = EditorState.DISPLAYING
        self.selected: Optional[SelectItemCommand] = None
        self.logger = get_logger(__name__)

    def run(self) -> List[str]:
        """Run the loop until the user continues.

        Returns:
            A copy of the edited list
        """
        while self.state != EditorState.TERMINATED:
            match self.state:
                case EditorState.DISPLAYING:
                    self.display()
                    self.state = EditorState.AWAITING_TOP_COMMAND
                case EditorState.AWAITING_TOP_COMMAND:
                    self._handle_list_command(self.ask_list_command())
                case EditorState.AWAITING_ITEM_COMMAND:
                    self._handle_item_action(self.ask_item_action())

        self.logger.debug(f"List editing finished with {len(self.items)} items")
        return list(self.items)

    def display(self) -> None:
        """Show the title and the numbered items."""
        self.channel.write_line("")
        self.channel.write_line([('class:list.title', self.title)])
        for number, value in enumerate(self.items, start=1):
            self.channel.write_line([
                ('class:list.index', str(number)),
                ('class:list.separator', '.'),
                ('', f" {value}"),
            ])
        if not self.items:
            self.channel.write_line(EMPTY_LIST_TEXT)
        self.channel.write_line("")

    def ask_list_command(self) -> ListCommand:
        """Ask what to do with the list."""
        item_count = len(self.items)
        hint = [('', "Type ")]
        if item_count:
            hint.append(('', "an item number to edit or delete, or "))
        hint += [
            ('', "'"), command_fragment(LIST_ADD_COMMAND), ('', "' to add an item, or '"),
            command_fragment(LIST_CONTINUE_COMMAND), ('', "' to continue/validate."),
        ]
        self.channel.write_line(hint)

        question = Question(
            message=question_fragments(LIST_CHOICE_QUESTION),
            completions=list_command_descriptions(item_count),
            validator=partial(parse_list_command, item_count=item_count)
        )
        return self.prompter.ask(question)

    def ask_item_action(self) -> ItemAction:
        """Ask what to do with the selected item."""
        message = [
            ('class:question', "Do you want to edit ("), command_fragment(ITEM_EDIT_COMMAND),
            ('class:question', ") or to delete ("), command_fragment(ITEM_DELETE_COMMAND),
            ('class:question', "), or return to the list ("), command_fragment(ITEM_RETURN_COMMAND),
            ('class:question', ", default)"),
            ('class:inputstart', INPUT_MARKER),
        ]
        question = Question(
            message=message,
            default=ItemAction.RETURN_TO_LIST.value,
            completions=ITEM_ACTION_DESCRIPTIONS,
            validator=parse_item_action
        )
        return self.prompter.ask(question)

    def ask_item_value(self, current: Optional[str] = None) -> str:
        """Ask the value of a new item, or of an existing one when current is given."""
        current = normalize(current)
        hint = f" (default is '{current}')" if current else ""
        question = Question(
            message=question_fragments(self.item_message, hint),
            default=current or None
        )
        return self.prompter.ask(question)

    def append_item(self, value: str) -> None:
        self.items.append(value)
        self.logger.debug(f"Item {len(self.items)} added")

    def replace_item(self, index: int, value: str) -> None:
        self.items[index] = value
        self.logger.debug(f"Item {index + 1} edited")

    def remove_item(self, index: int) -> None:
        del self.items[index]
        self.logger.debug(f"Item {index + 1} deleted")

    def _handle_list_command(self, command: ListCommand) -> None:
        match command:
            case AddItemCommand():
                value = self.ask_item_value()
                if value:
                    self.append_item(value)
                self.state = EditorState.DISPLAYING
            case SelectItemCommand():
                self.selected = command
                self.state = EditorState.AWAITING_ITEM_COMMAND
            case ContinueCommand():
                self.state = EditorState.TERMINATED

    def _handle_item_action(self, action: ItemAction) -> None:
        index = self.selected.index
        match action:
            case ItemAction.EDIT:
                value = self.ask_item_value(self.items[index])
                if value:
                    self.replace_item(index, value)
            case ItemAction.DELETE:
                self.remove_item(index)
            case ItemAction.RETURN_TO_LIST:
                pass

        self.selected = None
        self.state = EditorState.DISPLAYING
