"""
Widget catalog models.

A WidgetSpec is the static catalog entry written by hand; the registry turns
each one into an immutable WidgetDescriptor once the widget's markup has been
resolved and its argument model compiled.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hotspot_src.config import WIDGET_MIME_TYPE

FieldType = Literal["string", "integer", "number", "boolean", "array", "object"]


class FieldSpec(BaseModel):
    """One property of a widget's input schema."""

    model_config = ConfigDict(frozen=True)

    type: FieldType = "string"
    description: Optional[str] = None
    items: Optional["FieldSpec"] = None

    def to_json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type}
        if self.items is not None:
            schema["items"] = self.items.to_json_schema()
        if self.description:
            schema["description"] = self.description
        return schema


class InputSchema(BaseModel):
    """
    Tagged schema interpreted by the generic argument validator.

    Attributes:
        properties: Declared fields keyed by argument name
        required: Names that must be present in every call
        additional_properties: False closes the field set (unknown keys rejected)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    properties: dict[str, FieldSpec] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    additional_properties: bool = Field(False, alias="additionalProperties")

    @model_validator(mode="after")
    def _required_are_declared(self) -> "InputSchema":
        undeclared = [name for name in self.required if name not in self.properties]
        if undeclared:
            raise ValueError(f"Required fields not declared in properties: {undeclared}")
        return self

    def to_json_schema(self) -> dict[str, Any]:
        """Render as the JSON schema published in tools/list."""
        return {
            "type": "object",
            "properties": {
                name: spec.to_json_schema() for name, spec in self.properties.items()
            },
            "required": list(self.required),
            "additionalProperties": self.additional_properties,
        }


class WidgetSpec(BaseModel):
    """
    Static catalog entry for one widget.

    Attributes:
        id: Tool name, unique across the catalog
        title: Display title (also used as tool description)
        template_uri: ui:// URI of the widget markup, unique across the catalog
        invoking: Label shown while the tool runs
        invoked: Label shown once the tool has run
        response_text: Text block returned with every result
        input_schema: Arguments accepted by tools/call
        dataset: Canned dataset path, relative to the data directory
        component: Asset filename family; defaults to the widget id
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    template_uri: str = Field(..., min_length=1)
    invoking: str
    invoked: str
    response_text: str
    input_schema: InputSchema = Field(default_factory=InputSchema)
    dataset: str
    component: Optional[str] = None

    @property
    def component_name(self) -> str:
        return self.component or self.id


@dataclass(frozen=True)
class WidgetDescriptor:
    """A fully resolved widget, owned by the registry for the process lifetime."""

    id: str
    title: str
    template_uri: str
    invoking: str
    invoked: str
    markup: str
    response_text: str
    input_schema: InputSchema
    dataset_path: Path
    argument_model: type[BaseModel] = field(compare=False, repr=False)

    def meta(self) -> dict[str, Any]:
        """Capability metadata attached to every catalog entry and result."""
        return {
            "openai/outputTemplate": self.template_uri,
            "openai/toolInvocation/invoking": self.invoking,
            "openai/toolInvocation/invoked": self.invoked,
            "openai/widgetAccessible": True,
            "openai/resultCanProduceWidget": True,
        }

    def to_tool(self) -> dict[str, Any]:
        return {
            "name": self.id,
            "description": self.title,
            "inputSchema": self.input_schema.to_json_schema(),
            "title": self.title,
            "_meta": self.meta(),
            # Read-only tools skip the client's approval prompt
            "annotations": {
                "destructiveHint": False,
                "openWorldHint": False,
                "readOnlyHint": True,
            },
        }

    def to_resource(self) -> dict[str, Any]:
        return {
            "uri": self.template_uri,
            "name": self.title,
            "description": f"{self.title} widget markup",
            "mimeType": WIDGET_MIME_TYPE,
            "_meta": self.meta(),
        }

    def to_resource_template(self) -> dict[str, Any]:
        return {
            "uriTemplate": self.template_uri,
            "name": self.title,
            "description": f"{self.title} widget markup",
            "mimeType": WIDGET_MIME_TYPE,
            "_meta": self.meta(),
        }

    def to_resource_contents(self) -> dict[str, Any]:
        return {
            "uri": self.template_uri,
            "mimeType": WIDGET_MIME_TYPE,
            "text": self.markup,
            "_meta": self.meta(),
        }
