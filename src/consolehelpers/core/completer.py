"""
Answer completion for questions offering a known set of values.
"""
from typing import Dict, Iterable, Union

from prompt_toolkit.completion import Completer, Completion


class ChoiceCompleter(Completer):
    """Completer for the allowed answers of a question, with optional descriptions."""

    def __init__(self, values: Union[Dict[str, str], Iterable[str]], ignore_case: bool = True):
        """Initialize the completer with the values to offer.

        Args:
            values: Answers to complete, or a mapping of answers to descriptions
            ignore_case: Match typed text regardless of case
        """
        if isinstance(values, dict):
            self.value_list = [(str(value), description or "") for value, description in values.items()]
        else:
            self.value_list = [(str(value), "") for value in values]
        self.ignore_case = ignore_case

        # List of just the values for easy lookup
        self.values = [value for value, _ in self.value_list]

    def get_completions(self, document, complete_event):
        """Get completions for the text before the cursor.

        Args:
            document: The Document instance for the current input
            complete_event: The CompleteEvent that triggered this completion

        Yields:
            Completion instances for matching values with descriptions
        """
        text = document.text_before_cursor.lstrip()
        typed = text.lower() if self.ignore_case else text

        for value, description in self.value_list:
            candidate = value.lower() if self.ignore_case else value
            if candidate.startswith(typed):
                yield Completion(
                    value,
                    start_position=-len(text),
                    display_meta=description
                )
