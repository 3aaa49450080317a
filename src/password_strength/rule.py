import re
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .configuration import Configuration

__all__ = (
    "RuleKind",
    "RuleDefinition",
    "RULES",
    "get_rule",
    "format_message",
)

Params = Mapping[str, int | str]
Evaluator = Callable[[str, Optional[str], Configuration], Optional[Params]]

PLACEHOLDER = re.compile(r"\{(\w+)\}")

_LOCAL_PART = r"[\w!#$%&'*+\-/=?^`{|}~]+"
EMAIL_PATTERN = re.compile(
    r"(" + _LOCAL_PART + r"\.)*" + _LOCAL_PART + r"@"
    r"(((([a-z0-9][a-z0-9\-]{0,62}[a-z0-9])|[a-z])\.)+[a-z]{2,6}"
    r"|(\d{1,3}\.){3}\d{1,3}(:\d{1,5})?)",
    re.IGNORECASE | re.ASCII,
)
LOWER_PATTERN = re.compile(r"[a-z]")
UPPER_PATTERN = re.compile(r"[A-Z]")
NUMERIC_PATTERN = re.compile(r"\d", re.ASCII)
SPECIAL_PATTERN = re.compile(r"\W", re.ASCII)


class RuleKind(StrEnum):
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    CHECK_USERNAME = "checkUsername"
    CHECK_EMAIL = "checkEmail"
    MIN_LOWER = "minLower"
    MIN_UPPER = "minUpper"
    MIN_NUMERIC = "minNumeric"
    MIN_SPECIAL = "minSpecial"


def format_message(template: str, params: Params) -> str:
    """
    Substitutes ``{name}`` placeholders in `template` with values from `params`.

    Placeholders without a matching parameter are left as they are.

    Example::

        format_message("at least {n} character{plural}", {"n": 1, "plural": ""})
        # 'at least 1 character'
    """
    if not params:
        return template

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(params[name]) if name in params else match.group(0)

    return PLACEHOLDER.sub(replace, template)


def _at_least(n: int, found: int) -> Optional[Params]:
    if found >= n:
        return None
    return {"n": n, "found": found, "plural": "" if n == 1 else "s"}


def _at_most(n: int, found: int) -> Optional[Params]:
    if found <= n:
        return None
    return {"n": n, "found": found, "plural": "" if n == 1 else "s"}


def _min_length(
    password: str, username: Optional[str], config: Configuration
) -> Optional[Params]:
    return _at_least(config.min_length, len(password))


def _max_length(
    password: str, username: Optional[str], config: Configuration
) -> Optional[Params]:
    if config.max_length is None:
        return None
    return _at_most(config.max_length, len(password))


def _check_username(
    password: str, username: Optional[str], config: Configuration
) -> Optional[Params]:
    if not (config.check_username and username):
        return None
    return {} if username.casefold() in password.casefold() else None


def _check_email(
    password: str, username: Optional[str], config: Configuration
) -> Optional[Params]:
    if not config.check_email:
        return None
    return {} if EMAIL_PATTERN.fullmatch(password) else None


def _count_of(
    pattern: re.Pattern[str], threshold: Callable[[Configuration], int]
) -> Evaluator:
    def evaluate(
        password: str, username: Optional[str], config: Configuration
    ) -> Optional[Params]:
        return _at_least(threshold(config), len(pattern.findall(password)))

    return evaluate


@dataclass(frozen=True, slots=True)
class RuleDefinition:
    """
    A single check applied to a password.

    Attributes:
        kind: The rule identifier, equal to the configuration key governing it.
        message: The message template reported when the rule fails. It may refer
            to the ``{n}``, ``{found}`` and ``{plural}`` placeholders.
        evaluate: Returns ``None`` when the password passes, or the placeholder
            values for the message otherwise.
    """

    kind: RuleKind
    message: str
    evaluate: Evaluator

    def apply(
        self, password: str, username: Optional[str], config: Configuration
    ) -> Optional[str]:
        """Returns the formatted error message if the password breaks the rule."""
        params = self.evaluate(password, username, config)
        if params is None:
            return None
        return format_message(self.message, params)


RULES: tuple[RuleDefinition, ...] = (
    RuleDefinition(
        kind=RuleKind.MIN_LENGTH,
        message="Password should contain at least {n} character{plural} "
        "({found} found)!",
        evaluate=_min_length,
    ),
    RuleDefinition(
        kind=RuleKind.MAX_LENGTH,
        message="Password should contain at most {n} character{plural} "
        "({found} found)!",
        evaluate=_max_length,
    ),
    RuleDefinition(
        kind=RuleKind.CHECK_USERNAME,
        message="Password cannot contain the username",
        evaluate=_check_username,
    ),
    RuleDefinition(
        kind=RuleKind.CHECK_EMAIL,
        message="Password cannot contain an email address",
        evaluate=_check_email,
    ),
    RuleDefinition(
        kind=RuleKind.MIN_LOWER,
        message="Password should contain at least {n} lower case "
        "character{plural} ({found} found)!",
        evaluate=_count_of(LOWER_PATTERN, lambda config: config.min_lower),
    ),
    RuleDefinition(
        kind=RuleKind.MIN_UPPER,
        message="Password should contain at least {n} upper case "
        "character{plural} ({found} found)!",
        evaluate=_count_of(UPPER_PATTERN, lambda config: config.min_upper),
    ),
    RuleDefinition(
        kind=RuleKind.MIN_NUMERIC,
        message="Password should contain at least {n} numeric "
        "character{plural} ({found} found)!",
        evaluate=_count_of(NUMERIC_PATTERN, lambda config: config.min_numeric),
    ),
    RuleDefinition(
        kind=RuleKind.MIN_SPECIAL,
        message="Password should contain at least {n} special "
        "character{plural} ({found} found)!",
        evaluate=_count_of(SPECIAL_PATTERN, lambda config: config.min_special),
    ),
)

assert tuple(rule.kind for rule in RULES) == tuple(RuleKind), "Expected %r, got %r" % (
    tuple(RuleKind),
    tuple(rule.kind for rule in RULES),
)

_RULES_BY_KIND: Mapping[RuleKind, RuleDefinition] = MappingProxyType(
    {rule.kind: rule for rule in RULES}
)


def get_rule(kind: RuleKind | str) -> RuleDefinition:
    return _RULES_BY_KIND[RuleKind(kind)]
