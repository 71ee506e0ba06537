"""
ConsoleHelpers - interactive questions for command line programs.
"""
import logging

from consolehelpers.core.exceptions import (CapabilityError,
                                            ConfigurationError,
                                            ConsoleHelpersError,
                                            MissingInputError,
                                            TooManyInvalidAttemptsError)
from consolehelpers.core.validation import Accepted, Rejected, ValidationRule
from consolehelpers.interfaces import InteractiveCliHelper, ListEditor, Prompter
from consolehelpers.ui.terminal import TerminalChannel

__version__ = "0.1.0"

# Records are dropped until setup_logging installs a file handler
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'InteractiveCliHelper',
    'Prompter',
    'ListEditor',
    'TerminalChannel',
    'ValidationRule',
    'Accepted',
    'Rejected',
    'ConsoleHelpersError',
    'TooManyInvalidAttemptsError',
    'CapabilityError',
    'MissingInputError',
    'ConfigurationError',
]
