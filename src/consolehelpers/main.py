"""
Copyright (c) 2025 Jakob Bolliger

This file is part of ConsoleHelpers.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the LICENSE file in the
root directory of this source tree.

ConsoleHelpers - demo session asking every kind of question.
"""
import argparse
import sys

from consolehelpers.core.exceptions import (CapabilityError,
                                            MissingInputError,
                                            TooManyInvalidAttemptsError)
from consolehelpers.core.validation import ValidationRule
from consolehelpers.interfaces import InteractiveCliHelper
from consolehelpers.utils.logging_config import get_logger, setup_logging

DEFAULT_TITLE = "Servers"


def run_demo(helper: InteractiveCliHelper, title: str = DEFAULT_TITLE) -> dict:
    """Ask the demo questions and return the answers."""
    answers = {}
    answers['name'] = helper.ask_information("Project name", "demo", validator=ValidationRule.required())
    answers['port'] = int(helper.ask_information("Port", "8080", validator={'required': True, 'type': 'integer'}))
    answers['password'] = helper.ask_secret_information("Password")
    answers['database'] = helper.ask_in_choice("Database", ["sqlite", "postgresql", "mysql"], 0)
    answers['features'] = helper.ask_in_choice(
        "Features (comma separated)", ["cache", "mail", "auth"], [0, 2], multiple=True
    )
    answers['servers'] = helper.ask_list(title, "Server name", ["localhost"])
    answers['confirmed'] = helper.ask_confirmation("Save this configuration?", True)
    return answers


def main():
    """Main entry point for the demo."""
    parser = argparse.ArgumentParser(description="Interactive demo of the consolehelpers questions")
    parser.add_argument("-t", "--title", default=DEFAULT_TITLE,
                        help=f"Title of the edited list (default: {DEFAULT_TITLE})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging for debugging")

    args = parser.parse_args()

    log_file = setup_logging(args.verbose)
    logger = get_logger(__name__)
    logger.info("Demo session started")

    try:
        answers = run_demo(InteractiveCliHelper(), args.title)
    except TooManyInvalidAttemptsError as e:
        print(f"\nToo many invalid answers: {e.reason}")
        sys.exit(1)
    except CapabilityError as e:
        print(f"\nTerminal error: {str(e)}")
        sys.exit(1)
    except MissingInputError:
        print("\nInput ended before all questions were answered.")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\n\nSession terminated by user. Goodbye!")
        sys.exit(0)

    logger.info("Demo session finished")
    print()
    for key, value in answers.items():
        if key == 'password':
            value = '*' * len(value)
        print(f"{key}: {value}")
    if args.verbose:
        print(f"\nLog file: {log_file}")


if __name__ == "__main__":
    main()
