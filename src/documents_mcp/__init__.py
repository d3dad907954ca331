"""documents_mcp package initialization."""

from documents_mcp.dispatcher import Dispatcher
from documents_mcp.server import MCPServer, ToolResult
from documents_mcp.tools import ToolDefinition, ToolParameters

__all__ = [
    "Dispatcher",
    "MCPServer",
    "ToolDefinition",
    "ToolParameters",
    "ToolResult",
]
