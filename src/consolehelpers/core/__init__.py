"""
Core functionality for the consolehelpers package.

This package contains answer validation, the list editor command grammar,
completion and exception handling.
"""
from consolehelpers.core.commands import (AddItemCommand, ContinueCommand,
                                          ItemAction, ListCommand,
                                          SelectItemCommand, parse_item_action,
                                          parse_list_command)
from consolehelpers.core.completer import ChoiceCompleter
from consolehelpers.core.exceptions import (CapabilityError,
                                            ConfigurationError,
                                            ConsoleHelpersError,
                                            MissingInputError,
                                            TooManyInvalidAttemptsError)
from consolehelpers.core.validation import (Accepted, Rejected, RuleKind,
                                            ValidationRule, normalize)

__all__ = [
    'Accepted',
    'Rejected',
    'RuleKind',
    'ValidationRule',
    'normalize',
    'ListCommand',
    'AddItemCommand',
    'ContinueCommand',
    'SelectItemCommand',
    'ItemAction',
    'parse_list_command',
    'parse_item_action',
    'ChoiceCompleter',
    'ConsoleHelpersError',
    'TooManyInvalidAttemptsError',
    'CapabilityError',
    'MissingInputError',
    'ConfigurationError'
]
