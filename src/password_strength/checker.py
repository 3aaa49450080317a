import logging
from dataclasses import dataclass
from typing import Any, Generic, Mapping, Optional, TypeVar, overload

import pydantic
from typing_extensions import Unpack

from . import util
from .configuration import Configuration, ConfigurationOptions
from .exc import InvalidArgumentError, InvalidConfigurationError
from .preset import PRESETS, Preset, PresetSpec, load_preset
from .rule import RULES

__all__ = ("PasswordStrength", "ValidationResult")

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Fields that take part in the maximum length invariant
_INVARIANT_FIELDS = frozenset(
    ("max_length", "min_lower", "min_upper", "min_numeric", "min_special")
)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    messages: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.messages


def _invalid_argument(
    ex: pydantic.ValidationError, names: Mapping[str, str]
) -> InvalidArgumentError:
    """
    Converts the first validation error, reporting the field under the name the
    caller used for it.
    """
    error = util.model.convert_errors(ex)[0]
    loc = str(error["loc"][0]) if error["loc"] else ""
    return InvalidArgumentError(
        error["msg"],
        InvalidArgumentError.Context(
            field_name=names.get(loc, loc), value=error.get("input")
        ),
    )


def _alias(name: str) -> str:
    field = Configuration.model_fields.get(name)
    return field.alias or name if field else name


def _check_params(config: Configuration) -> None:
    """
    Validates the right threshold for the maximum length.

    Raises:
        InvalidConfigurationError: Raised when the required characters can not fit
            into the maximum length.
    """
    if config.max_length is None:
        return

    total_chars = config.required_chars()
    if total_chars > config.max_length:
        raise InvalidConfigurationError(
            "Total number of required characters {ctx[total_chars]} is greater than "
            "maximum allowed {ctx[max_length]}. Validation is impossible!",
            InvalidConfigurationError.Context(
                total_chars=total_chars, max_length=config.max_length
            ),
        )


class _Option(Generic[T]):
    """Exposes a configuration field as a validated attribute of the checker."""

    name: str

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    @overload
    def __get__(self, instance: None, owner: type) -> "_Option[T]": ...

    @overload
    def __get__(self, instance: "PasswordStrength", owner: type) -> T: ...

    def __get__(
        self, instance: Optional["PasswordStrength"], owner: type
    ) -> "_Option[T] | T":
        if instance is None:
            return self
        value: T = getattr(instance._config, self.name)
        return value

    def __set__(self, instance: "PasswordStrength", value: T) -> None:
        instance._assign(self.name, value)


class PasswordStrength:
    """
    Checks passwords against the strength rules.

    Each instance owns its configuration and the messages of its last validation,
    so it should not be shared between threads without external locking.

    Example::

        from password_strength import PasswordStrength, Preset

        checker = PasswordStrength.create(Preset.NORMAL)
        if not checker.validate("hunter2", username="hunter"):
            print(checker.errors)
    """

    min_length = _Option[int]()
    max_length = _Option[Optional[int]]()
    min_lower = _Option[int]()
    min_upper = _Option[int]()
    min_numeric = _Option[int]()
    min_special = _Option[int]()
    check_username = _Option[bool]()
    check_email = _Option[bool]()

    def __init__(
        self,
        preset: Preset | str | None = None,
        *,
        presets: Mapping[str, PresetSpec] = PRESETS,
        **options: Unpack[ConfigurationOptions],
    ) -> None:
        """
        Args:
            preset: The preset applied on top of the default configuration.
            presets: The preset table the checker picks presets from.
            **options: Configuration fields applied after the preset.

        Raises:
            UnknownPresetError: Raised when the preset is not in the table.
            InvalidArgumentError: Raised when an option has an invalid value.
            InvalidConfigurationError: Raised when the resulting configuration can
                never be satisfied.
        """
        self._config = Configuration()
        self._presets = presets
        self._preset: Optional[str] = None
        self._result = ValidationResult()

        _check_params(self._config)

        if preset is not None:
            self.set_preset(preset)
        self.configure(**options)

    @classmethod
    def create(
        cls,
        preset: Preset | str | None = None,
        *,
        presets: Mapping[str, PresetSpec] = PRESETS,
        **options: Unpack[ConfigurationOptions],
    ) -> "PasswordStrength":
        return cls(preset, presets=presets, **options)

    @property
    def preset(self) -> Optional[str]:
        """
        The name of the preset the configuration comes from.

        ``None`` before any preset is applied and once a field has been changed
        after the preset was applied.
        """
        return self._preset

    @preset.setter
    def preset(self, name: Preset | str) -> None:
        self.set_preset(name)

    @property
    def presets(self) -> Mapping[str, PresetSpec]:
        return self._presets

    @property
    def configuration(self) -> Configuration:
        return self._config.model_copy()

    @property
    def errors(self) -> list[str]:
        """The messages of the most recent :meth:`validate` call."""
        return list(self._result.messages)

    def set_preset(self, name: Preset | str) -> None:
        """
        Overwrites every configuration field with the values of the given preset.

        Raises:
            UnknownPresetError: Raised when the checker has no preset with this name.
            InvalidConfigurationError: Raised when the preset breaks the maximum
                length invariant. The checker is left untouched.
        """
        spec = load_preset(name, self._presets)

        config = Configuration(
            min_length=spec.min_length,
            max_length=spec.max_length,
            min_lower=spec.min_lower,
            min_upper=spec.min_upper,
            min_numeric=spec.min_numeric,
            min_special=spec.min_special,
            check_username=spec.check_username,
            check_email=spec.check_email,
        )
        _check_params(config)

        self._config, self._preset = config, str(name)
        logger.debug("applied preset %r", self._preset)

    def configure(self, **options: Unpack[ConfigurationOptions]) -> None:
        """
        Updates several configuration fields at once.

        The new values are validated together and applied only if all of them are
        valid, so fields bound by the maximum length invariant can be moved in any
        order. Fields may be given by name (``min_lower``) or by their camelCase
        alias (``minLower``).
        """
        if not (fields := dict(options)):
            return

        names = {_alias(name): name for name in fields}
        try:
            config = Configuration.model_validate(
                {
                    **self._config.model_dump(by_alias=True),
                    **{alias: fields[name] for alias, name in names.items()},
                }
            )
        except pydantic.ValidationError as ex:
            raise _invalid_argument(ex, names) from ex

        _check_params(config)

        self._config, self._preset = config, None
        logger.debug("updated configuration fields %r", tuple(fields))

    def _assign(self, name: str, value: Any) -> None:
        previous = getattr(self._config, name)

        try:
            setattr(self._config, name, value)
        except pydantic.ValidationError as ex:
            raise _invalid_argument(ex, {_alias(name): name}) from ex

        if name in _INVARIANT_FIELDS:
            try:
                _check_params(self._config)
            except InvalidConfigurationError:
                setattr(self._config, name, previous)
                raise

        self._preset = None
        logger.debug("set %r to %r", name, value)

    def check(self, password: str, username: Optional[str] = None) -> ValidationResult:
        """Evaluates the password against every rule, in registry order."""
        return ValidationResult(
            messages=tuple(
                message
                for rule in RULES
                if (message := rule.apply(password, username, self._config))
                is not None
            )
        )

    def validate(self, password: str, username: Optional[str] = None) -> bool:
        """
        Validates a password and keeps any error messages until the next call.

        Args:
            password: The candidate password.
            username: If given and username checking is enabled, the password must
                not contain it (case-insensitive).

        Returns:
            ``True`` if the password satisfies every rule.
        """
        self._result = self.check(password, username)

        logger.debug("%d rule(s) failed", len(self._result.messages))
        return self._result.passed
