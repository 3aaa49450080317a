from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import Mapping, NoReturn, Optional

import click
from rich.console import Console, Group, RenderableType
from rich.text import Text

from ... import exc
from ..._conf import Settings
from ...checker import PasswordStrength, ValidationResult
from ...preset import PRESETS, PresetSpec, read_presets
from ..exc import CLIError, ConfigError

__all__ = ["check", "build_checker", "load_presets"]

logger = getLogger(__name__)


class RecordStyle(StrEnum):
    INFO = "steel_blue3"
    CRITICAL = "yellow"


@dataclass(slots=True)
class ResultRenderer:
    result: ValidationResult

    def compose_renderable(self) -> RenderableType:
        if self.result.passed:
            return Text("=> Password satisfies all rules", style=RecordStyle.INFO)

        return Group(
            *(
                Text(f"=> {message}", style=RecordStyle.CRITICAL)
                for message in self.result.messages
            ),
        )


def handle_exception(ex: Exception) -> NoReturn:
    if isinstance(ex, exc.SourceError):
        raise ConfigError(str(ex)) from ex

    if isinstance(
        ex,
        (
            exc.UnknownPresetError,
            exc.InvalidArgumentError,
            exc.InvalidConfigurationError,
        ),
    ):
        raise ConfigError("Invalid checker configuration: %s" % ex) from ex

    logger.debug(ex, exc_info=ex)
    raise CLIError("Unexpected error: %r" % ex, exit_code=128) from ex


def load_presets(settings: Settings) -> Mapping[str, PresetSpec]:
    """Returns the preset table named by the settings, or the built-in one."""
    if settings.presets_source is None:
        return PRESETS

    try:
        return read_presets(settings.presets_source)
    except exc.SourceError as ex:
        handle_exception(ex)


def build_checker(settings: Settings, preset: Optional[str] = None) -> PasswordStrength:
    """
    Builds a checker from the settings, applying the preset first and the field
    overrides on top of it.
    """
    presets = load_presets(settings)

    try:
        return PasswordStrength(
            preset or settings.preset, presets=presets, **settings.overrides()
        )
    except exc.ApplicationError as ex:
        handle_exception(ex)


@click.command()
@click.argument("password", required=False)
@click.option("-p", "--preset", help="Name of the preset to apply.")
@click.option(
    "-u", "--username", help="Username the password must not contain."
)
@click.pass_context
def check(
    ctx: click.Context,
    password: Optional[str],
    preset: Optional[str],
    username: Optional[str],
) -> None:
    """
    Check a password against the strength rules.

    Prompts for the password when it is not given as an argument. Exits with
    status 1 when the password breaks any rule.
    """
    checker = build_checker(ctx.obj, preset)

    if password is None:
        password = click.prompt("Password", hide_input=True)
    assert isinstance(password, str), "Expected %r, got %r" % (str.__name__, password)

    result = checker.check(password, username)

    Console().print(ResultRenderer(result).compose_renderable(), soft_wrap=True)

    if not result.passed:
        ctx.exit(1)
