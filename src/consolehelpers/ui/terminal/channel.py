"""
Terminal channel using prompt_toolkit.

This module provides the TerminalChannel class, the only place where
consolehelpers reads from or writes to the terminal.
"""
import sys
from typing import Dict, Iterable, Optional, Union

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.completion import DummyCompleter
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import DummyHistory, InMemoryHistory
from prompt_toolkit.styles import Style

from consolehelpers.config import (HIDDEN_INPUT_UNSUPPORTED_MESSAGE,
                                   MISSING_INPUT_MESSAGE)
from consolehelpers.core.completer import ChoiceCompleter
from consolehelpers.core.exceptions import (CapabilityError,
                                            ConfigurationError,
                                            MissingInputError)
from consolehelpers.ui.resources import PROMPT_STYLES, Fragments
from consolehelpers.utils.logging_config import get_logger

Completions = Union[Dict[str, str], Iterable[str]]


class TerminalChannel:
    """Line based terminal input and output."""

    def __init__(self, input=None, output=None, styles: Optional[Dict[str, str]] = None):
        """Initialize the channel.

        Args:
            input: prompt_toolkit Input to read from (defaults to stdin)
            output: prompt_toolkit Output to write to (defaults to stdout)
            styles: Style classes overriding the default colors
        """
        self.logger = get_logger(__name__)
        self.input = input
        self.output = output

        style_rules = dict(PROMPT_STYLES)
        style_rules.update(styles or {})
        try:
            self.style = Style.from_dict(style_rules)
        except (ValueError, AssertionError) as e:
            raise ConfigurationError(f"Invalid style: {e}") from e

        # Sessions are created on first read so that building a channel never touches the terminal
        self._sessions = {}
        self.history = InMemoryHistory()

    def get_session(self, echo: bool = True) -> PromptSession:
        """Get the session used for visible or for hidden answers.

        Hidden answers use a session without history so they cannot be recalled.
        """
        if echo not in self._sessions:
            self._sessions[echo] = PromptSession(
                input=self.input,
                output=self.output,
                style=self.style,
                history=self.history if echo else DummyHistory()
            )
        return self._sessions[echo]

    def write_line(self, fragments: Union[Fragments, str] = "") -> None:
        """Write one line of formatted text.

        Args:
            fragments: Plain text or (style, text) fragments
        """
        text = fragments if isinstance(fragments, str) else FormattedText(fragments)
        print_formatted_text(text, style=self.style, output=self.output)

    def supports_hidden_input(self) -> bool:
        """Tell whether typed characters can be kept off the screen."""
        if self.input is not None:
            # prompt_toolkit draws the line itself and masks it
            return True
        return sys.stdin is not None and sys.stdin.isatty()

    def read_line(self, message: Union[Fragments, str], echo: bool = True,
                  completions: Optional[Completions] = None) -> str:
        """Read one line typed by the user.

        Args:
            message: Prompt shown in front of the cursor
            echo: Show typed characters; when False they are masked
            completions: Advisory values offered for tab-completion

        Returns:
            The raw line, without the line ending

        Raises:
            CapabilityError: echo is False but the input is not a terminal
            MissingInputError: the input stream has ended
        """
        if not echo and not self.supports_hidden_input():
            raise CapabilityError(HIDDEN_INPUT_UNSUPPORTED_MESSAGE)

        # PromptSession keeps the last completer when given None
        completer = ChoiceCompleter(completions) if completions else DummyCompleter()
        prompt_message = message if isinstance(message, str) else FormattedText(message)

        try:
            return self.get_session(echo).prompt(
                prompt_message,
                is_password=not echo,
                completer=completer,
                complete_while_typing=False
            )
        except EOFError as e:
            self.logger.warning("Input stream ended while waiting for an answer")
            raise MissingInputError(MISSING_INPUT_MESSAGE) from e
