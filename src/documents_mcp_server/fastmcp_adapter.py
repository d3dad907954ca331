"""Adapters for exposing the document tools via FastMCP."""

from __future__ import annotations

import json
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult

from documents_mcp.errors import MCPError
from documents_mcp.server import MCPServer
from documents_mcp.tools import ToolDefinition


class ToolDefinitionAdapter(Tool):
    """Expose a registered :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, server: MCPServer, definition: ToolDefinition) -> None:
        """Create a FastMCP tool that runs ``definition`` through ``server``."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            output_schema=definition.result_schema(),
            tags=set(),
        )
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Validate arguments and delegate to the registered handler.

        Raises:
            ToolError: Carrying the structured error payload as JSON text.
        """
        try:
            result = self._server.run_tool(self.name, parameters=arguments)
        except MCPError as exc:
            raise ToolError(json.dumps(exc.to_dict(), default=str)) from exc
        if isinstance(result.payload, dict):
            return ToolResult(structured_content=result.payload)
        return ToolResult(content=result.text())


def to_fastmcp_tools(server: MCPServer) -> list[Tool]:
    """Convert every registered tool into a FastMCP-compatible tool."""
    tools: list[Tool] = []
    for name in server.available_tools():
        definition = server.get_tool(name)
        if definition is not None:
            tools.append(ToolDefinitionAdapter(server, definition))
    return tools


def build_fastmcp_app(server: MCPServer) -> FastMCP:
    """Create a FastMCP server instance exposing every registered tool."""
    app = FastMCP(
        name="doffin-documents-mcp",
        instructions=(
            "Bid document generation, compliance and brand review exposed over "
            "the Model Context Protocol."
        ),
    )
    for tool in to_fastmcp_tools(server):
        app.add_tool(tool)
    return app
