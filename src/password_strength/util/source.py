import logging
import pathlib
from typing import Any, Callable, TypeVar

import pydantic
import ruamel.yaml as yaml
from ruamel.yaml.error import YAMLError

from ..exc import SourceSyntaxError, SourceValidationError
from .model import convert_errors

__all__ = ("read_source",)

T = TypeVar("T")

logger = logging.getLogger(__name__)
loader = yaml.YAML(typ="safe")


def read_source(fn: pathlib.Path, kind: str, builder: Callable[[Any], T]) -> T:
    """
    Parses a YAML file and hands the document to `builder`.

    Raises:
        SourceSyntaxError: Raised when the file is not valid YAML.
        SourceValidationError: Raised when `builder` rejects the document.
    """
    logger.debug("reading %s from %r", kind, str(fn))

    try:
        payload = loader.load(fn.read_bytes())
    except YAMLError as ex:
        raise SourceSyntaxError(
            str(ex), SourceSyntaxError.Context(kind=kind, loc={"filename": fn})
        ) from ex

    try:
        return builder(payload)
    except pydantic.ValidationError as ex:
        raise SourceValidationError(
            str(convert_errors(ex)),
            SourceValidationError.Context(kind=kind, loc={"filename": fn}),
        ) from ex
