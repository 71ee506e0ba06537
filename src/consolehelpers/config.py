"""
Configuration settings for the consolehelpers package.
All constants and configuration variables are defined here.
"""
from pathlib import Path

# Prompting
DEFAULT_MAX_ATTEMPTS = 10
INPUT_MARKER = " > "

# Confirmation tokens, compared case-insensitively
YES_ANSWERS = ("y", "yes", "t", "true", "on", "1")
NO_ANSWERS = ("n", "no", "f", "false", "off", "0")

# Choice questions
DEFAULT_CHOICE_ERROR_MESSAGE = "%s is invalid"
MULTIPLE_CHOICE_SEPARATOR = ","

# List editor command letters
LIST_ADD_COMMAND = "a"
LIST_CONTINUE_COMMAND = "c"
ITEM_EDIT_COMMAND = "e"
ITEM_DELETE_COMMAND = "d"
ITEM_RETURN_COMMAND = "l"

# Messages
REQUIRED_ANSWER_MESSAGE = "A response is required"
NOT_AN_INTEGER_MESSAGE = "The response is not an integer"
NOT_A_NUMBER_MESSAGE = "The response is not a number"
WRONG_FORMAT_MESSAGE = "Wrong format ({pattern})"
CONFIRMATION_ERROR_MESSAGE = "Please answer 'y' or 'n'"
DUPLICATE_CHOICE_MESSAGE = "{choice} is selected more than once"
UNKNOWN_COMMAND_MESSAGE = "Unknown command"
UNKNOWN_ITEM_MESSAGE = "Unknown item number"
HIDDEN_INPUT_UNSUPPORTED_MESSAGE = "Unable to hide the response."
MISSING_INPUT_MESSAGE = "Aborted."
EMPTY_LIST_TEXT = "  Empty list"
LIST_CHOICE_QUESTION = "Your choice"

# Logging
LOGS_DIR = Path.home() / ".consolehelpers" / "logs"
LOG_FILE_NAME = "consolehelpers.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
