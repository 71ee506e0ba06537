import io

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from prompt_toolkit.output.plain_text import PlainTextOutput

from consolehelpers.core.exceptions import (CapabilityError,
                                            ConfigurationError,
                                            MissingInputError)
from consolehelpers.interfaces import InteractiveCliHelper
from consolehelpers.ui.resources import question_fragments
from consolehelpers.ui.terminal import TerminalChannel


@pytest.fixture
def pipe_input():
    with create_pipe_input() as inp:
        yield inp


def test_read_line(pipe_input):
    channel = TerminalChannel(input=pipe_input, output=DummyOutput())
    pipe_input.send_text("hello world\r")
    assert channel.read_line(question_fragments("Name")) == "hello world"


def test_read_hidden_line(pipe_input):
    channel = TerminalChannel(input=pipe_input, output=DummyOutput())
    pipe_input.send_text("s3cret\r")
    assert channel.read_line("Password > ", echo=False) == "s3cret"
    assert list(channel.history.get_strings()) == []


def test_end_of_input(pipe_input):
    channel = TerminalChannel(input=pipe_input, output=DummyOutput())
    pipe_input.send_text("\x04")
    with pytest.raises(MissingInputError):
        channel.read_line("Name > ")


def test_helper_on_terminal_channel(pipe_input):
    helper = InteractiveCliHelper(TerminalChannel(input=pipe_input, output=DummyOutput()))
    pipe_input.send_text("Bob\r")
    assert helper.ask_information("Name", "Alice") == "Bob"


def test_hidden_input_needs_a_terminal(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("typed\n"))
    channel = TerminalChannel(output=DummyOutput())
    assert not channel.supports_hidden_input()
    with pytest.raises(CapabilityError):
        channel.read_line("Password > ", echo=False)


def test_write_line_degrades_to_plain_text():
    stdout = io.StringIO()
    channel = TerminalChannel(output=PlainTextOutput(stdout))
    channel.write_line([('class:list.index', "1"), ('class:list.separator', "."), ('', " alpha")])
    channel.write_line("plain")
    assert stdout.getvalue().splitlines() == ["1. alpha", "plain"]


def test_invalid_style():
    with pytest.raises(ConfigurationError):
        TerminalChannel(output=DummyOutput(), styles={'question': 'notacolor'})
