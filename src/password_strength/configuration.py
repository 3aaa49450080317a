from typing import Annotated, Optional

import annotated_types
from pydantic import BaseModel, ConfigDict, Strict
from pydantic.alias_generators import to_camel
from typing_extensions import TypedDict

__all__ = (
    "Threshold",
    "MaxLength",
    "Toggle",
    "Configuration",
    "ConfigurationOptions",
)

Threshold = Annotated[int, Strict(), annotated_types.Ge(0)]
MaxLength = Optional[Annotated[int, Strict(), annotated_types.Ge(1)]]
Toggle = Annotated[bool, Strict()]

_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
    validate_assignment=True,
)


class Configuration(BaseModel):
    """
    Rule parameters owned by a single checker.

    Attributes:
        min_length: Minimum number of characters.
        max_length: Maximum number of characters, ``None`` means no limit.
        min_lower: Minimal number of lower case characters.
        min_upper: Minimal number of upper case characters.
        min_numeric: Minimal number of numeric digit characters.
        min_special: Minimal number of special characters.
        check_username: Whether the password may not contain the username.
        check_email: Whether the password may not contain an email address.
    """

    model_config = _config

    min_length: Threshold = 4
    max_length: MaxLength = None
    min_lower: Threshold = 2
    min_upper: Threshold = 2
    min_numeric: Threshold = 2
    min_special: Threshold = 2
    check_username: Toggle = True
    check_email: Toggle = True

    def required_chars(self) -> int:
        return self.min_lower + self.min_upper + self.min_numeric + self.min_special


class ConfigurationOptions(TypedDict, total=False):
    min_length: int
    max_length: int | None
    min_lower: int
    min_upper: int
    min_numeric: int
    min_special: int
    check_username: bool
    check_email: bool
