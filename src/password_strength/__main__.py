#!/usr/bin/env python3

import logging
import pathlib
from typing import Optional

import click
import lazy_object_proxy
import pydantic

from password_strength import exc
from password_strength._cli.commands.check import check
from password_strength._cli.commands.presets import presets
from password_strength._cli.exc import ConfigError
from password_strength._conf import Settings, load_settings
from password_strength.util.model import convert_errors


def resolve_settings(fn: Optional[pathlib.Path]) -> Settings:
    try:
        return load_settings(fn)
    except exc.SourceError as ex:
        raise ConfigError(str(ex)) from ex
    except pydantic.ValidationError as ex:
        raise ConfigError(
            "Invalid environment settings.\n\n%s" % convert_errors(ex)
        ) from ex


@click.group()
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(dir_okay=False, exists=True, path_type=pathlib.Path),
    help="YAML file with default settings, overridden by the environment.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Optional[pathlib.Path]) -> None:
    """Check passwords against configurable strength rules."""
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)
    ctx.obj = lazy_object_proxy.Proxy(lambda: resolve_settings(config))


cli.add_command(check)
cli.add_command(presets)

if __name__ == "__main__":
    cli(auto_envvar_prefix="PASSWORD_STRENGTH")
