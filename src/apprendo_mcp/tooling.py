"""Tool definitions for the book catalogue server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, NoReturn

from pydantic import BaseModel, ConfigDict, ValidationError

from apprendo_mcp.errors import raise_mcp_error


class ToolParameters(BaseModel):
    """Base parameters schema for MCP tools."""

    model_config = ConfigDict(extra="ignore")


def _argument_label(field: str) -> str:
    return field.replace("_", " ").capitalize()


@dataclass
class ToolDefinition:
    """Description of a tool that can be registered with the server.

    Attributes:
        name: Unique name of the tool.
        description: Human-readable description of the tool purpose.
        parameters_model: Pydantic model used to validate input parameters.
        handler: Callable that executes the tool logic and returns the text
            placed in the response envelope.
    """

    name: str
    description: str
    parameters_model: type[ToolParameters]
    handler: Callable[[Dict[str, Any]], str]

    def validate(self, parameters: Dict[str, Any]) -> Dict[str, Any]:
        """Check required arguments and coerce incoming tool parameters.

        Args:
            parameters: Input parameters provided for the tool.

        Raises:
            MCPError: ``MissingArgument`` when a required argument is absent or
                null, ``InvalidInput`` when a value cannot be coerced.

        Returns:
            Validated parameter dictionary.
        """

        try:
            model = self.parameters_model.model_validate(parameters)
        except ValidationError as error:
            for issue in error.errors():
                if issue["type"] == "missing" or issue.get("input", ...) is None:
                    self._raise_missing(str(issue["loc"][0]))
            raise_mcp_error(
                "InvalidInput",
                f"Invalid parameters for tool '{self.name}'",
                [issue["msg"] for issue in error.errors()],
            )
        values = model.model_dump()
        for field, info in self.parameters_model.model_fields.items():
            if info.is_required() and values.get(field) is None:
                self._raise_missing(field)
        return values

    def _raise_missing(self, field: str) -> NoReturn:
        raise_mcp_error(
            "MissingArgument",
            f"{_argument_label(field)} is required",
            {"tool": self.name, "argument": field},
        )

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON schema advertised for the tool's arguments."""

        return self.parameters_model.model_json_schema()

    def metadata(self) -> Dict[str, Any]:
        """Return a discovery-friendly description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }
