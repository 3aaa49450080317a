import pydantic
import pydantic_core

__all__ = ("convert_errors",)


CUSTOM_TYPES = {
    "int_from_float": "int_type",
    "int_parsing": "int_type",
    "bool_parsing": "bool_type",
    "unexpected_keyword_argument": "extra_field",
    "extra_forbidden": "extra_field",
    "dict_type": "mapping_type",
    "model_type": "mapping_type",
    "model_attributes_type": "mapping_type",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/
    "extra_field": "Unknown configuration field",
    "missing": "Field is required",
    "int_type": "Input must be a valid integer",
    "bool_type": "Input must be a valid boolean",
    "greater_than_equal": "Input must be greater than or equal to {ge}",
    "mapping_type": "Input must be a valid mapping",
    "frozen_instance": "Preset fields are read-only",
}


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []
    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type
        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message
        if ctx:
            # we don't want to show the context to the user
            del error["ctx"]

        new_errors.append(error)
    return new_errors
