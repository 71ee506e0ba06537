"""
Custom exceptions for the consolehelpers package.

This module defines specific exception types for the failures a prompting
call can surface to its caller. Answers that merely fail validation are not
exceptions: they are reported to the user and asked again.
"""


class ConsoleHelpersError(Exception):
    """Base exception class for all consolehelpers errors."""
    pass


class TooManyInvalidAttemptsError(ConsoleHelpersError):
    """Exception raised when a question got no valid answer within its attempt budget."""

    def __init__(self, message: str, attempts: int = None, reason: str = None):
        super().__init__(message)
        self.attempts = attempts
        self.reason = reason

    def __str__(self):
        base_msg = super().__str__()
        if self.attempts:
            base_msg += f" (Attempts: {self.attempts})"
        if self.reason:
            base_msg += f" (Last error: {self.reason})"
        return base_msg


class CapabilityError(ConsoleHelpersError):
    """Exception raised when the terminal cannot do what a question requires."""
    pass


class MissingInputError(ConsoleHelpersError):
    """Exception raised when the input stream ends before an answer is given."""
    pass


class ConfigurationError(ConsoleHelpersError):
    """Exception raised when a question is configured with invalid arguments."""
    pass
