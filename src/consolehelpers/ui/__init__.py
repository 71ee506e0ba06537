"""
UI package for the consolehelpers package.

This package contains the terminal channel, styles and message formatting
used by the questions.
"""
from consolehelpers.ui.resources import PROMPT_STYLES, UIColors
from consolehelpers.ui.terminal import TerminalChannel

__all__ = [
    'TerminalChannel',

    # Resources
    'UIColors',
    'PROMPT_STYLES',
]
