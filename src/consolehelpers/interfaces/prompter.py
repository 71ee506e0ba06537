"""
Copyright (c) 2025 Jakob Bolliger

This file is part of ConsoleHelpers.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Question and answer prompts.

This module provides the Prompter class, which asks one question at a
time on a terminal channel and keeps asking until the answer is valid or
the attempt budget is spent.
"""
import re
from dataclasses import dataclass
from functools import partial
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from consolehelpers.config import (CONFIRMATION_ERROR_MESSAGE,
                                   DEFAULT_CHOICE_ERROR_MESSAGE,
                                   DEFAULT_MAX_ATTEMPTS,
                                   DUPLICATE_CHOICE_MESSAGE, INPUT_MARKER,
                                   MULTIPLE_CHOICE_SEPARATOR, NO_ANSWERS,
                                   YES_ANSWERS)
from consolehelpers.core.exceptions import (ConfigurationError,
                                            TooManyInvalidAttemptsError)
from consolehelpers.core.validation import (INTEGER_PATTERN, Accepted,
                                            Rejected,
                                            ValidationResult, Validator,
                                            as_validator, normalize)
from consolehelpers.ui.resources import (Fragments, format_error_message,
                                         question_fragments)
from consolehelpers.utils.logging_config import get_logger

MULTIPLE_CHOICE_PATTERN = re.compile(r'[^,]+(?:,[^,]+)*')


@dataclass(frozen=True)
class Question:
    """One question to ask.

    Attributes:
        message: Formatted text shown in front of the cursor
        default: Answer used when the user submits an empty line
        default_answer: Value returned as is, without validation, on an empty line
        completions: Advisory values offered for tab-completion
        validator: Function checking the normalized answer
        echo: Show typed characters
        max_attempts: Attempt budget when a validator is set
    """
    message: Fragments
    default: Optional[str] = None
    default_answer: Any = None
    completions: Optional[Union[Dict[str, str], Sequence[str]]] = None
    validator: Optional[Validator] = None
    echo: bool = True
    max_attempts: Optional[int] = None


def parse_confirmation(text: str) -> ValidationResult:
    """Turn a yes/no answer into a boolean."""
    answer = text.lower()
    if answer in YES_ANSWERS:
        return Accepted(True)
    if answer in NO_ANSWERS:
        return Accepted(False)
    return Rejected(CONFIRMATION_ERROR_MESSAGE)


def format_choice_error(error_message: str, token: str) -> str:
    if '%s' in error_message:
        return error_message.replace('%s', token)
    return error_message


def find_choice(token: str, options: Sequence[str]) -> Optional[int]:
    """Find the option a token designates, by value first and then by index."""
    for index, option in enumerate(options):
        if option == token:
            return index
    if INTEGER_PATTERN.fullmatch(token) and int(token) < len(options):
        return int(token)
    return None


def resolve_choice(text: str, options: Sequence[str], multiple: bool = False,
                   error_message: str = DEFAULT_CHOICE_ERROR_MESSAGE) -> ValidationResult:
    """Resolve an answer to a choice question.

    Args:
        text: Normalized answer
        options: The available options
        multiple: Accept a comma separated list of choices
        error_message: Message for unknown choices, "%s" is replaced by the choice

    Returns:
        Accepted with the chosen option (or list of options), or Rejected
    """
    if multiple:
        if not MULTIPLE_CHOICE_PATTERN.fullmatch(text):
            return Rejected(format_choice_error(error_message, text))
        tokens = [token.strip() for token in text.split(MULTIPLE_CHOICE_SEPARATOR)]
        if '' in tokens:
            return Rejected(format_choice_error(error_message, text))
    else:
        tokens = [text]

    selected = []
    for token in tokens:
        index = find_choice(token, options)
        if index is None:
            return Rejected(format_choice_error(error_message, token))
        if index in selected:
            return Rejected(DUPLICATE_CHOICE_MESSAGE.format(choice=token))
        selected.append(index)

    if multiple:
        return Accepted([options[index] for index in selected])
    return Accepted(options[selected[0]])


class Prompter:
    """Asks questions on a terminal channel."""

    def __init__(self, channel, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        """Initialize the prompter.

        Args:
            channel: Object with write_line and read_line, such as TerminalChannel
            max_attempts: Attempt budget for questions with a validator
        """
        if max_attempts < 1:
            raise ConfigurationError("max_attempts must be at least 1")
        self.channel = channel
        self.max_attempts = max_attempts
        self.logger = get_logger(__name__)

    def ask(self, question: Question) -> Any:
        """Ask a question until it gets a valid answer.

        Returns:
            The normalized answer, or the value the validator made of it

        Raises:
            TooManyInvalidAttemptsError: no valid answer within the attempt budget
        """
        if question.validator is None:
            answer = self._read_answer(question)
            if answer == '' and question.default_answer is not None:
                return question.default_answer
            return answer

        attempts = question.max_attempts or self.max_attempts
        reason = None
        for attempt in range(1, attempts + 1):
            answer = self._read_answer(question)
            if answer == '' and question.default_answer is not None:
                return question.default_answer
            result = question.validator(answer)
            if result.ok:
                return result.value

            reason = result.reason
            self.logger.debug(f"Answer rejected (attempt {attempt}/{attempts}): {reason}")
            self.channel.write_line(format_error_message(reason))

        self.logger.warning(f"No valid answer after {attempts} attempts")
        raise TooManyInvalidAttemptsError("Too many invalid answers", attempts, reason)

    def _read_answer(self, question: Question) -> str:
        raw = self.channel.read_line(
            question.message,
            echo=question.echo,
            completions=question.completions
        )
        answer = normalize(raw)
        if answer == '' and question.default is not None:
            answer = normalize(question.default)
        return answer

    def ask_confirmation(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question.

        Args:
            message: The question
            default: Answer used when the user just hits enter

        Returns:
            True if the user has confirmed
        """
        hint = f" ( 'y' or 'n', default is {'y' if default else 'n'})"
        question = Question(
            message=question_fragments(message, hint),
            default='y' if default else 'n',
            validator=parse_confirmation
        )
        return self.ask(question)

    def ask_information(self, message: str, default: str = '',
                        completions: Optional[Union[Dict[str, str], Iterable[str]]] = None,
                        validator=None) -> str:
        """Ask a value to the user.

        Args:
            message: The question
            default: Answer used when the user just hits enter
            completions: Values offered for tab-completion
            validator: A ValidationRule, a dict of constraints ("required",
                "type", "regexp") or a function returning Accepted or Rejected

        Returns:
            The value given by the user
        """
        if completions is not None and not isinstance(completions, dict):
            completions = list(completions)

        default = normalize(default)
        hint = f" (default is '{default}')" if default else ""
        question = Question(
            message=question_fragments(message, hint),
            default=default or None,
            completions=completions,
            validator=as_validator(validator)
        )
        return self.ask(question)

    def ask_secret_information(self, message: str, default: str = '') -> str:
        """Ask a hidden value to the user, like a password.

        Raises:
            CapabilityError: the terminal cannot hide what is typed
        """
        question = Question(
            message=question_fragments(message),
            default=normalize(default) or None,
            echo=False
        )
        return self.ask(question)

    def ask_in_choice(self, message: str, options: Sequence[str],
                      default: Union[int, Sequence[int], None] = 0,
                      multiple: bool = False,
                      error_message: str = DEFAULT_CHOICE_ERROR_MESSAGE) -> Union[str, List[str]]:
        """Ask a value from a list of options.

        Options can be designated by value or by their 0-based index.

        Args:
            message: The question
            options: Possible values
            default: Index, or list of indexes when multiple, of the default choice, or None
            multiple: Let the user pick several comma separated values
            error_message: Shown when a choice is unknown, "%s" is replaced by the choice

        Returns:
            The chosen option, or the list of chosen options when multiple
        """
        options = [str(option) for option in options]
        if not options:
            raise ConfigurationError("A choice question needs at least one option")

        indexes = self._choice_default(default, len(options))
        if indexes:
            default_text = MULTIPLE_CHOICE_SEPARATOR.join(str(index) for index in indexes)
            hint = f" (default is '{default_text}')"
            # Default indexes designate options directly, even when an option looks like an index
            if multiple:
                default_answer = [options[index] for index in indexes]
            else:
                default_answer = options[indexes[0]]
        else:
            hint = ""
            default_answer = None

        fragments = [('class:question', message)]
        if hint:
            if "\n" in message:
                fragments.append(('', "\n"))
            fragments.append(('', hint))
        for index, option in enumerate(options):
            fragments.append(('', f"\n  [{index}] {option}"))
        fragments.append(('', "\n"))
        fragments.append(('class:inputstart', INPUT_MARKER))

        question = Question(
            message=fragments,
            default_answer=default_answer,
            completions=options + [str(index) for index in range(len(options))],
            validator=partial(resolve_choice, options=options, multiple=multiple,
                              error_message=error_message)
        )
        return self.ask(question)

    @staticmethod
    def _choice_default(default, option_count: int) -> List[int]:
        if default is None or default is False:
            return []
        indexes = [default] if isinstance(default, int) else list(default)
        for index in indexes:
            if not isinstance(index, int) or not 0 <= index < option_count:
                raise ConfigurationError(f"Default choice out of range: {index!r}")
        return indexes
