"""
Copyright (c) 2025 Jakob Bolliger

This file is part of ConsoleHelpers.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

UI resources for the consolehelpers package.

This module contains the colors, style classes and message fragments
shared by every question.
"""
from typing import List, Tuple

from consolehelpers.config import INPUT_MARKER

Fragments = List[Tuple[str, str]]


# UI Color Configuration
class UIColors:
    """Color definitions for the prompt components."""
    QUESTION_FG = "ansicyan"
    INPUT_MARKER_FG = "ansiyellow"
    ERROR_FG = "ansired"

    # List editor
    LIST_TITLE_FG = "ansiwhite"
    LIST_INDEX_FG = "ansigreen"
    LIST_SEPARATOR_FG = "ansiyellow"
    COMMAND_FG = "ansigreen"


# Style classes, fed to prompt_toolkit's Style.from_dict
PROMPT_STYLES = {
    'question': f'{UIColors.QUESTION_FG}',
    'inputstart': f'{UIColors.INPUT_MARKER_FG} bold',
    'error': f'{UIColors.ERROR_FG}',
    'command': f'{UIColors.COMMAND_FG}',
    'list.title': f'{UIColors.LIST_TITLE_FG} bold',
    'list.index': f'{UIColors.LIST_INDEX_FG}',
    'list.separator': f'{UIColors.LIST_SEPARATOR_FG}',
}


def question_fragments(message: str, hint: str = "") -> Fragments:
    """Build the text shown in front of the cursor for a question.

    Args:
        message: The question
        hint: Plain text appended after the question, such as the default

    Returns:
        Formatted text fragments ending with the input marker
    """
    fragments = [('class:question', message)]
    if hint:
        # Multi-line questions get their hint on a line of its own
        if "\n" in message:
            fragments.append(('', "\n"))
        fragments.append(('', hint))
    fragments.append(('class:inputstart', INPUT_MARKER))
    return fragments


def command_fragment(command: str) -> Tuple[str, str]:
    """Highlight a command letter inside a sentence."""
    return ('class:command', command)


def format_error_message(message: str) -> Fragments:
    """Format an error message shown before a question is asked again.

    Args:
        message: The error message content

    Returns:
        Formatted error message fragments
    """
    return [('class:error', message)]
