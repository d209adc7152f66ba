"""
Generic tool-argument validation.

Each widget's InputSchema is compiled once (at registry build) into a strict
pydantic model; tools/call validates against that model whatever widget it
targets, so there is no per-widget validation code.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, create_model

from hotspot_src.core.errors import InvalidArguments
from hotspot_src.models.widgets import FieldSpec, InputSchema, WidgetDescriptor

_SCALAR_TYPES: dict[str, Any] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "object": dict[str, Any],
}


def _annotation(spec: FieldSpec) -> Any:
    if spec.type == "array":
        item = _annotation(spec.items) if spec.items is not None else Any
        return list[item]
    return _SCALAR_TYPES[spec.type]


def _model_name(widget_id: str) -> str:
    words = re.split(r"[^0-9A-Za-z]+", widget_id)
    return "".join(word.capitalize() for word in words if word) + "Arguments"


def build_argument_model(widget_id: str, schema: InputSchema) -> type[BaseModel]:
    """Compile an InputSchema into a pydantic model.

    Argument names are carried as aliases so any JSON key (including ones that
    are not Python identifiers) can be declared.

    Args:
        widget_id: Used to name the generated model.
        schema: The widget's input schema.

    Returns:
        A strict model class; extra keys are forbidden when the schema is closed.
    """
    fields: dict[str, Any] = {}
    for index, (name, spec) in enumerate(schema.properties.items()):
        default = ... if name in schema.required else None
        fields[f"field_{index}"] = (_annotation(spec), Field(default, alias=name))

    config = ConfigDict(
        strict=True,
        extra="allow" if schema.additional_properties else "forbid",
    )
    return create_model(_model_name(widget_id), __config__=config, **fields)


def _describe(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "arguments"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


def validate_arguments(
    widget: WidgetDescriptor, arguments: Optional[dict[str, Any]]
) -> dict[str, Any]:
    """Validate caller arguments against a widget's schema.

    Args:
        widget: Target widget.
        arguments: Raw arguments from tools/call (None is treated as empty).

    Returns:
        The validated arguments, restricted to the keys the caller supplied.
        Omitted optional fields stay omitted.

    Raises:
        InvalidArguments: On a missing required field, a wrong type, or an
            undeclared field when the schema is closed.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidArguments(
            f"Invalid arguments for tool '{widget.id}': expected an object"
        )

    try:
        parsed = widget.argument_model.model_validate(arguments)
    except ValidationError as e:
        raise InvalidArguments(
            f"Invalid arguments for tool '{widget.id}': {_describe(e)}"
        ) from e

    dumped = parsed.model_dump(by_alias=True)
    return {key: dumped[key] for key in arguments if key in dumped}
