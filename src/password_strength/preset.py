import logging
import pathlib
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, RootModel
from pydantic.alias_generators import to_camel

from . import util
from .configuration import MaxLength, Threshold, Toggle
from .exc import UnknownPresetError

__all__ = ("Preset", "PresetSpec", "PRESETS", "load_preset", "read_presets")

logger = logging.getLogger(__name__)


class Preset(StrEnum):
    SIMPLE = "simple"
    NORMAL = "normal"
    FAIR = "fair"
    MEDIUM = "medium"
    STRONG = "strong"


class PresetSpec(BaseModel):
    """A complete set of rule parameters representing a strength level."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    min_length: Threshold
    min_upper: Threshold
    min_lower: Threshold
    min_numeric: Threshold
    min_special: Threshold
    check_username: Toggle
    check_email: Toggle
    max_length: MaxLength = None


class PresetTable(RootModel[dict[str, PresetSpec]]):
    root: dict[str, PresetSpec]


PRESETS: Mapping[str, PresetSpec] = MappingProxyType(
    {
        Preset.SIMPLE: PresetSpec(
            min_length=6,
            min_upper=0,
            min_lower=1,
            min_numeric=1,
            min_special=0,
            check_username=False,
            check_email=False,
        ),
        Preset.NORMAL: PresetSpec(
            min_length=8,
            min_upper=1,
            min_lower=1,
            min_numeric=1,
            min_special=0,
            check_username=True,
            check_email=True,
        ),
        Preset.FAIR: PresetSpec(
            min_length=10,
            min_upper=1,
            min_lower=1,
            min_numeric=1,
            min_special=1,
            check_username=True,
            check_email=True,
        ),
        Preset.MEDIUM: PresetSpec(
            min_length=10,
            min_upper=1,
            min_lower=1,
            min_numeric=2,
            min_special=1,
            check_username=True,
            check_email=True,
        ),
        Preset.STRONG: PresetSpec(
            min_length=12,
            min_upper=2,
            min_lower=2,
            min_numeric=2,
            min_special=2,
            check_username=True,
            check_email=True,
        ),
    }
)


def load_preset(
    name: Preset | str, presets: Mapping[str, PresetSpec] = PRESETS
) -> PresetSpec:
    try:
        return presets[name]
    except KeyError:
        raise UnknownPresetError(
            "Invalid preset {ctx[preset]!r}, expected one of {ctx[available]!r}.",
            UnknownPresetError.Context(
                preset=str(name), available=tuple(str(key) for key in presets)
            ),
        ) from None


def read_presets(fn: pathlib.Path) -> Mapping[str, PresetSpec]:
    """
    Reads a preset table from a YAML file.

    The document maps preset names to their parameters, using the camelCase
    field names::

        relaxed:
          minLength: 6
          minUpper: 0
          minLower: 1
          minNumeric: 1
          minSpecial: 0
          checkUsername: false
          checkEmail: false

    Raises:
        SourceSyntaxError: Raised when the file is not valid YAML.
        SourceValidationError: Raised when the document is not a preset table.
    """
    table = util.source.read_source(fn, "presets", PresetTable.model_validate)

    logger.debug("read presets %r", tuple(table.root))
    return MappingProxyType(table.root)
