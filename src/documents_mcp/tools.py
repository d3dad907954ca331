"""Tool definitions for the documents MCP server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from documents_mcp.errors import InvalidParamsError


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools.

    Fields are declared in snake_case and exposed in camelCase on the wire.
    Unknown keys are ignored and numbers are accepted where text is expected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


def describe_validation_error(error: ValidationError) -> str:
    """Turn the first pydantic error into a message naming the parameter."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if not location:
        return "Parameter 'arguments' must be an object"
    if first["type"] == "missing" or first.get("input") is None:
        return f"Parameter '{location}' is required"
    return f"Parameter '{location}' is invalid: {first['msg']}"


@dataclass
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Callable receiving the validated parameters model.
        output_schema: JSON type name of each top-level result field.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: Callable[[Any], object]
    output_schema: Dict[str, Any] | None = field(default=None)

    def validate(self, parameters: object) -> ToolParameters:
        """Validate and coerce incoming tool parameters.

        Args:
            parameters: Raw argument bag provided for the tool.

        Raises:
            InvalidParamsError: If a required parameter is missing or a value
                has the wrong type. The message names the parameter.

        Returns:
            Validated parameters model.
        """

        try:
            return self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            raise InvalidParamsError(
                describe_validation_error(error),
                details=error.errors(include_url=False, include_context=False),
            ) from error

    def invoke(self, parameters: object) -> object:
        """Validate the argument bag and run the handler with the result."""

        return self.handler(self.validate(parameters))

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON schema advertised for the tool arguments."""

        schema = self.parameters_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema

    def result_schema(self) -> Dict[str, Any] | None:
        """Expand ``output_schema`` into an object JSON schema.

        ``output_schema`` maps each top-level result field to a JSON type
        name. Tools without one (plain-text results) return ``None``.
        """

        if self.output_schema is None:
            return None
        return {
            "type": "object",
            "properties": {
                field_name: {"type": json_type}
                for field_name, json_type in self.output_schema.items()
            },
            "required": list(self.output_schema),
        }

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
