"""
Terminal input and output using prompt_toolkit.

This package contains the terminal channel the questions are asked on.
"""
from consolehelpers.ui.terminal.channel import TerminalChannel

__all__ = ['TerminalChannel']
