"""Tool registry for the documents MCP server.

The registry is built once at startup and only read afterwards, so concurrent
requests may look tools up without locking. Transport and envelope handling live
in :mod:`documents_mcp.protocol` and :mod:`documents_mcp.dispatcher`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from documents_mcp.tools import ToolDefinition


@dataclass
class ToolResult:
    """Result returned by tool execution.

    Attributes:
        name: Name of the tool that produced the result.
        payload: Value returned by the tool handler.

    """

    name: str
    payload: object

    def text(self) -> str:
        """Render the payload as the text of a content block.

        Strings are passed through unchanged; everything else is serialized
        as JSON.

        """
        if isinstance(self.payload, str):
            return self.payload
        return json.dumps(self.payload)

    def to_content(self) -> dict[str, list[dict[str, str]]]:
        """Wrap the payload in a single text content block."""
        return {"content": [{"type": "text", "text": self.text()}]}


class MCPServer:
    """In-memory registry and dispatcher for MCP tools.

    Tools keep their registration order, which is also the order used when the
    catalogue is built.
    """

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
        """List the names of registered tools in registration order."""
        return list(self._tools)

    def get_tool(self, name: object) -> ToolDefinition | None:
        """Look up a tool by name, returning ``None`` when it is unknown."""
        if not isinstance(name, str):
            return None
        return self._tools.get(name)

    def run_tool(self, name: str, *, parameters: object = None) -> ToolResult:
        """Execute a registered tool.

        Args:
            name: Name of the registered tool to execute.
            parameters: Argument bag for the tool; ``None`` means no arguments.

        Raises:
            KeyError: If the tool name is not registered.
            InvalidParamsError: If parameter validation fails.

        Returns:
            ToolResult containing the tool name and its payload.

        """
        tool = self.get_tool(name)
        if tool is None:
            raise KeyError(f"Tool '{name}' is not registered")

        payload = tool.invoke({} if parameters is None else parameters)
        return ToolResult(name=name, payload=payload)

    def to_catalog(self) -> dict[str, list[dict[str, Any]]]:
        """Produce the discovery payload returned by ``tools/list``."""
        return {"tools": [tool.metadata() for tool in self._tools.values()]}
