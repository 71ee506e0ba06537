"""
Answer validation for questions.

Validators never raise on bad input. They return an ``Accepted`` result
carrying the (possibly transformed) value, or a ``Rejected`` result carrying
the message shown to the user before the question is asked again.
"""
import enum
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, Union

from consolehelpers.config import (NOT_A_NUMBER_MESSAGE,
                                   NOT_AN_INTEGER_MESSAGE,
                                   REQUIRED_ANSWER_MESSAGE,
                                   WRONG_FORMAT_MESSAGE)
from consolehelpers.core.exceptions import ConfigurationError

INTEGER_PATTERN = re.compile(r'[0-9]+')


@dataclass(frozen=True)
class Accepted:
    """A valid answer, with the value to hand back to the caller."""
    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """An invalid answer, with the reason shown to the user."""
    reason: str

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Union[Accepted, Rejected]
Validator = Callable[[str], ValidationResult]


def normalize(value: Optional[str]) -> str:
    """Trim an answer; a missing answer becomes the empty string."""
    return value.strip() if value else ''


def is_numeric(text: str) -> bool:
    """Tell whether text reads as a finite number."""
    try:
        number = float(text)
    except (TypeError, ValueError):
        return False
    return number not in (float('inf'), float('-inf')) and number == number


def check_required(text: str) -> ValidationResult:
    if text.strip() == '':
        return Rejected(REQUIRED_ANSWER_MESSAGE)
    return Accepted(text)


def check_integer(text: str) -> ValidationResult:
    if not INTEGER_PATTERN.fullmatch(text):
        return Rejected(NOT_AN_INTEGER_MESSAGE)
    return Accepted(text)


def check_float(text: str) -> ValidationResult:
    try:
        float(text)
    except ValueError:
        return Rejected(NOT_A_NUMBER_MESSAGE)
    return Accepted(text)


def check_regex(text: str, pattern: str) -> ValidationResult:
    if not re.search(pattern, text):
        return Rejected(WRONG_FORMAT_MESSAGE.format(pattern=pattern))
    return Accepted(text)


class RuleKind(enum.Enum):
    """Kinds of validation rules."""
    ALWAYS_VALID = "always_valid"
    REQUIRED = "required"
    INTEGER = "integer"
    FLOAT = "float"
    REGEX = "regex"
    CUSTOM = "custom"
    ALL_OF = "all_of"


@dataclass(frozen=True)
class ValidationRule:
    """Declarative validation rule.

    Build rules with the class methods rather than the constructor, e.g.
    ``ValidationRule.required()`` or ``ValidationRule.regex(r'^\\w+$')``.

    Raises:
        ConfigurationError: a regex rule with an invalid pattern, or a
            custom rule without a callable predicate
    """
    kind: RuleKind
    pattern: str = ''
    predicate: Optional[Validator] = None
    rules: Tuple['ValidationRule', ...] = field(default_factory=tuple)

    def __post_init__(self):
        match self.kind:
            case RuleKind.REGEX:
                try:
                    re.compile(self.pattern)
                except (re.error, TypeError) as e:
                    raise ConfigurationError(f"Invalid regular expression {self.pattern!r}: {e}") from e
            case RuleKind.CUSTOM:
                if not callable(self.predicate):
                    raise ConfigurationError("A custom rule needs a callable predicate")

    @classmethod
    def always_valid(cls) -> 'ValidationRule':
        return cls(RuleKind.ALWAYS_VALID)

    @classmethod
    def required(cls) -> 'ValidationRule':
        return cls(RuleKind.REQUIRED)

    @classmethod
    def integer(cls) -> 'ValidationRule':
        return cls(RuleKind.INTEGER)

    @classmethod
    def float_number(cls) -> 'ValidationRule':
        return cls(RuleKind.FLOAT)

    @classmethod
    def regex(cls, pattern: str) -> 'ValidationRule':
        return cls(RuleKind.REGEX, pattern=pattern)

    @classmethod
    def custom(cls, predicate: Validator) -> 'ValidationRule':
        return cls(RuleKind.CUSTOM, predicate=predicate)

    @classmethod
    def all_of(cls, *rules: 'ValidationRule') -> 'ValidationRule':
        return cls(RuleKind.ALL_OF, rules=tuple(rules))

    @classmethod
    def from_constraints(cls, required: bool = False, type: str = 'string',
                         regexp: str = '') -> 'ValidationRule':
        """Build a rule from a set of constraints.

        Args:
            required: Reject empty answers
            type: One of "string", "integer", "float" or "number"
            regexp: Pattern the answer must match (only for "string")

        Returns:
            The combined rule, checked in the order required, type, regexp
        """
        rules = []
        if required:
            rules.append(cls.required())

        match type:
            case 'integer':
                rules.append(cls.integer())
            case 'float' | 'number':
                rules.append(cls.float_number())
            case 'string':
                if regexp:
                    rules.append(cls.regex(regexp))
            case _:
                raise ConfigurationError(f"Unknown answer type: {type}")

        if not rules:
            return cls.always_valid()
        if len(rules) == 1:
            return rules[0]
        return cls.all_of(*rules)

    def validate(self, text: str) -> ValidationResult:
        """Check an answer against this rule."""
        match self.kind:
            case RuleKind.ALWAYS_VALID:
                return Accepted(text)
            case RuleKind.REQUIRED:
                return check_required(text)
            case RuleKind.INTEGER:
                return check_integer(text)
            case RuleKind.FLOAT:
                return check_float(text)
            case RuleKind.REGEX:
                return check_regex(text, self.pattern)
            case RuleKind.CUSTOM:
                return self.predicate(text)
            case RuleKind.ALL_OF:
                result = Accepted(text)
                for rule in self.rules:
                    result = rule.validate(result.value)
                    if not result.ok:
                        break
                return result
        raise ConfigurationError(f"Unsupported rule kind: {self.kind}")

    __call__ = validate


def as_validator(validator) -> Optional[Validator]:
    """Turn what a caller may pass as a validator into a validator function.

    Args:
        validator: None, a ValidationRule, a constraints dict (keys
            "required", "type", "regexp") or a callable returning a
            validation result

    Returns:
        A validator function, or None when nothing needs checking
    """
    if validator is None:
        return None
    if isinstance(validator, ValidationRule):
        return validator.validate
    if isinstance(validator, dict):
        unknown = set(validator) - {'required', 'type', 'regexp'}
        if unknown:
            raise ConfigurationError(f"Unknown constraints: {', '.join(sorted(unknown))}")
        return ValidationRule.from_constraints(**validator).validate
    if callable(validator):
        return validator
    raise ConfigurationError(f"Unsupported validator: {validator!r}")
