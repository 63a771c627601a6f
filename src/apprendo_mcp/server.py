"""Tool registry and dispatcher shared by every transport.

The dispatcher is deliberately free of transport details: the stdio pipe and
the HTTP endpoints both reach the catalogue through :meth:`MCPServer.run_tool`,
so identical invocations produce identical results regardless of framing.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from apprendo_mcp.errors import raise_mcp_error
from apprendo_mcp.tooling import ToolDefinition

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    """Envelope returned by tool execution.

    Attributes:
        name: Name of the tool that produced the result.
        content: Content items, each tagged with its ``type``.

    """

    name: str
    content: list[dict[str, str]] = field(default_factory=list)

    @classmethod
    def from_text(cls, name: str, text: str) -> ToolResult:
        """Wrap a single text payload in an envelope."""
        return cls(name=name, content=[{"type": "text", "text": text}])

    @property
    def text(self) -> str:
        """Concatenated text of every text content item."""
        return "".join(
            item["text"] for item in self.content if item.get("type") == "text"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire shape of the envelope."""
        return {"content": [dict(item) for item in self.content]}

    def to_json(self) -> str:
        """Serialize the envelope to JSON.

        Returns:
            JSON representation of the tool result.

        """
        return json.dumps(self.to_dict())


class MCPServer:
    """In-memory registry and dispatcher for MCP tools."""

    def __init__(self) -> None:
        """Initialize an empty server registry."""
        self._tools: dict[str, ToolDefinition] = {}

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List the names of registered tools.

        Returns:
            Sorted list of tool names.

        """
        return sorted(self._tools)

    def get_tool(self, name: str) -> ToolDefinition:
        """Return the definition registered under ``name``.

        Raises:
            MCPError: ``UnknownTool`` if nothing is registered under ``name``.

        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: %s", name)
            raise_mcp_error("UnknownTool", f"Unknown tool: {name}", {"tool": name})
        return tool

    def run_tool(
        self, name: str, *, parameters: dict[str, Any] | None = None
    ) -> ToolResult:
        """Execute a registered tool.

        Args:
            name: Name of the registered tool to execute.
            parameters: Optional arguments for the tool.

        Raises:
            MCPError: If the tool is unknown, an argument is missing or a
                requested book or chapter does not exist.

        Returns:
            ToolResult envelope holding the tool's text output.

        """
        tool = self.get_tool(name)
        validated_params = tool.validate(parameters or {})
        text = tool.handler(validated_params)
        logger.debug("Tool %s returned %d characters", name, len(text))
        return ToolResult.from_text(name, text)

    def list_tools(self) -> list[dict[str, Any]]:
        """Describe every tool in registration order.

        Returns:
            Tool listings with name, description and input schema.

        """
        return [tool.metadata() for tool in self._tools.values()]

    def to_catalog(self) -> dict[str, dict[str, Any]]:
        """Produce a catalog for discovery.

        Returns:
            Mapping of tool names to their metadata.

        """
        return {name: tool.metadata() for name, tool in self._tools.items()}
