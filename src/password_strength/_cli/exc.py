from dataclasses import dataclass

import click


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    An error reported to the user as ``Error: <message>`` with `exit_code`.

    Codes above 1 stay within the user-defined range 64 - 113 of
    https://tldp.org/LDP/abs/html/exitcodes.html, apart from 128 for unexpected
    failures.
    """

    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        click.ClickException.__init__(self, self.message)


@dataclass(slots=True)
class ConfigError(CLIError):
    """The settings, presets file or checker configuration can't be used."""

    exit_code: int = 64
