import pathlib
from typing import Annotated, Any, Optional

import annotated_types
from pydantic import FilePath
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from . import util
from .configuration import ConfigurationOptions

__all__ = ("Settings", "load_settings")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PASSWORD_STRENGTH_",
        extra="forbid",
        validate_default=False,
    )

    preset: Optional[str] = None
    presets_source: Optional[FilePath] = None

    min_length: Optional[Annotated[int, annotated_types.Ge(0)]] = None
    max_length: Optional[Annotated[int, annotated_types.Ge(1)]] = None
    min_lower: Optional[Annotated[int, annotated_types.Ge(0)]] = None
    min_upper: Optional[Annotated[int, annotated_types.Ge(0)]] = None
    min_numeric: Optional[Annotated[int, annotated_types.Ge(0)]] = None
    min_special: Optional[Annotated[int, annotated_types.Ge(0)]] = None
    check_username: Optional[bool] = None
    check_email: Optional[bool] = None

    def overrides(self) -> ConfigurationOptions:
        """Returns the configuration fields that were explicitly set."""
        return ConfigurationOptions(
            **self.model_dump(  # type: ignore[typeddict-item]
                include=set(ConfigurationOptions.__annotations__),
                exclude_none=True,
            )
        )

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings


def _build_settings(payload: Any) -> Settings:
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        # rejects the document with a pydantic "mapping" error
        return Settings.model_validate(payload)
    return Settings(**payload)


def load_settings(fn: Optional[pathlib.Path] = None) -> Settings:
    """
    Builds the settings from the environment and, if given, a YAML file whose
    values the environment overrides.

    Raises:
        SourceSyntaxError: Raised when the file is not valid YAML.
        SourceValidationError: Raised when the file holds invalid settings.
        pydantic.ValidationError: Raised when the environment holds invalid
            settings.
    """
    if fn is None:
        return Settings()
    return util.source.read_source(fn, "configuration", _build_settings)
