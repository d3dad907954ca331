"""Health check tool."""

from __future__ import annotations

from documents_mcp.tools import ToolDefinition, ToolParameters

PONG = "pong from documents-mcp"


class PingParams(ToolParameters):
    """The ping tool takes no parameters."""


def ping_tool() -> ToolDefinition:
    """Create the ping tool definition."""

    def handler(_: PingParams) -> str:
        return PONG

    return ToolDefinition(
        name="ping",
        description="Health check - responds with 'pong from documents-mcp'",
        parameters_model=PingParams,
        handler=handler,
    )
