import pathlib
from dataclasses import dataclass
from typing import Any, ClassVar, NotRequired, TypedDict

from typing_extensions import override

__all__ = (
    "ApplicationError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "UnknownPresetError",
    "Location",
    "SourceError",
    "SourceSyntaxError",
    "SourceValidationError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class InvalidArgumentError(ApplicationError):
    """
    Raised when a configuration field receives a value that violates its type or
    range contract.
    """

    class Context(TypedDict):
        """
        Attributes:
            field_name: The name of the rejected configuration field.
            value: The rejected value.
        """

        field_name: str
        value: Any

    ctx: Context

    @override
    def format_message(self) -> str:
        return "Invalid value %r for %r: %s" % (
            self.ctx["value"],
            self.ctx["field_name"],
            self.message,
        )


@dataclass(slots=True)
class InvalidConfigurationError(ApplicationError):
    """
    Raised when the required character counts can never fit into the maximum
    password length, so no password could pass validation.
    """

    class Context(TypedDict):
        total_chars: int
        max_length: int

    ctx: Context


@dataclass(slots=True)
class UnknownPresetError(ApplicationError):
    class Context(TypedDict):
        preset: str
        available: tuple[str, ...]

    ctx: Context


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]
    col: NotRequired[int]


@dataclass(slots=True)
class SourceError(ApplicationError):
    """Raised when a YAML source (a presets or configuration file) can't be used."""

    class Context(TypedDict):
        """
        Attributes:
            kind: What the file holds, e.g. ``"presets"`` or ``"configuration"``.
            loc: Where the problem was found.
        """

        kind: str
        loc: Location

    ctx: Context

    verb: ClassVar[str] = "Loading"

    @override
    def format_message(self) -> str:
        return "%s failed for %s file %r.\n\n%s" % (
            self.verb,
            self.ctx["kind"],
            str(self.ctx["loc"]["filename"]),
            self.message,
        )


@dataclass(slots=True)
class SourceSyntaxError(SourceError):
    verb: ClassVar[str] = "Decoding"


@dataclass(slots=True)
class SourceValidationError(SourceError):
    verb: ClassVar[str] = "Validation"
