"""
Copyright (c) 2025 Jakob Bolliger

This file is part of ConsoleHelpers.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Entry point class gathering every kind of question.
"""
from typing import Iterable, List, Optional

from consolehelpers.config import DEFAULT_MAX_ATTEMPTS
from consolehelpers.interfaces.list_editor import ListEditor
from consolehelpers.interfaces.prompter import Prompter
from consolehelpers.ui.terminal import TerminalChannel


class InteractiveCliHelper(Prompter):
    """Asks confirmations, values, secrets, choices and lists on the terminal.

    Example:
        helper = InteractiveCliHelper()
        if helper.ask_confirmation("Configure the servers?", True):
            servers = helper.ask_list("Servers", "Server name", ["localhost"])
    """

    def __init__(self, channel=None, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        """Initialize the helper.

        Args:
            channel: Terminal channel to use (default: a TerminalChannel on stdin/stdout)
            max_attempts: Attempt budget for questions with a validator
        """
        super().__init__(channel or TerminalChannel(), max_attempts)

    def ask_list(self, title: str, item_message: str,
                 items: Optional[Iterable[str]] = None) -> List[str]:
        """Let the user edit a list of values.

        Args:
            title: Title shown above the list
            item_message: Question asked for the value of a new or edited item
            items: Starting values

        Returns:
            The edited list
        """
        return ListEditor(self, title, item_message, items).run()
