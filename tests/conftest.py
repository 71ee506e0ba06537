"""
Pytest configuration and fixtures.
"""
import pytest

from consolehelpers.core.exceptions import MissingInputError
from consolehelpers.interfaces import InteractiveCliHelper


def to_text(fragments) -> str:
    """Flatten formatted text fragments into plain text."""
    if isinstance(fragments, str):
        return fragments
    return "".join(text for _, text in fragments)


class ScriptedChannel:
    """Terminal channel replaying prepared answers and recording what is shown."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.lines = []
        self.prompts = []
        self.echoes = []
        self.completions = []

    def write_line(self, fragments=""):
        self.lines.append(to_text(fragments))

    def read_line(self, message, echo=True, completions=None):
        self.prompts.append(to_text(message))
        self.echoes.append(echo)
        self.completions.append(completions)
        if not self.answers:
            raise MissingInputError("Aborted.")
        return self.answers.pop(0)


@pytest.fixture
def channel():
    return ScriptedChannel()


@pytest.fixture
def helper(channel):
    return InteractiveCliHelper(channel)
