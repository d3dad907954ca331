"""End-to-end coverage for the FastMCP server wrapper."""

from __future__ import annotations

import pytest
from fastmcp.client import Client

from documents_mcp.server import MCPServer
from documents_mcp_server.fastmcp_adapter import build_fastmcp_app


@pytest.mark.anyio()
async def test_fastmcp_server_supports_tool_discovery(server: MCPServer) -> None:
    """Every registered tool is listed with its input schema."""
    app = build_fastmcp_app(server)

    async with Client(app) as client:
        tools = await client.list_tools()

    by_name = {tool.name: tool for tool in tools}
    assert set(by_name) == set(server.available_tools())
    assert by_name["documents.get"].inputSchema["required"] == ["documentId"]


@pytest.mark.anyio()
async def test_fastmcp_generates_and_fetches_document(server: MCPServer) -> None:
    """Structured payloads flow through FastMCP tool calls."""
    app = build_fastmcp_app(server)

    async with Client(app) as client:
        generated = await client.call_tool(
            "documents.generate.word",
            {
                "bidId": "bid-fastmcp",
                "title": "FastMCP Bid",
                "sections": [{"name": "Intro", "content": "Hello there"}],
            },
        )
        document_id = generated.structured_content["documentId"]

        fetched = await client.call_tool("documents.get", {"documentId": document_id})

    assert generated.structured_content["format"] == "WORD"
    assert fetched.structured_content["bidId"] == "bid-fastmcp"


@pytest.mark.anyio()
async def test_fastmcp_ping_returns_text(server: MCPServer) -> None:
    app = build_fastmcp_app(server)

    async with Client(app) as client:
        result = await client.call_tool("ping", {})

    assert result.content[0].text == "pong from documents-mcp"


@pytest.mark.anyio()
async def test_fastmcp_propagates_structured_errors(server: MCPServer) -> None:
    """Errors raised by tool handlers surface through FastMCP client calls."""
    app = build_fastmcp_app(server)

    async with Client(app) as client:
        result = await client.call_tool(
            "documents.get",
            {"documentId": "missing"},
            raise_on_error=False,
        )

    assert result.is_error is True
    assert "Document not found: missing" in result.content[0].text


@pytest.mark.anyio()
async def test_fastmcp_advertises_output_schemas(server: MCPServer) -> None:
    """Structured tools declare their result fields; text tools declare none."""
    app = build_fastmcp_app(server)

    async with Client(app) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    listing = tools["documents.templates.list"].outputSchema
    assert listing == {
        "type": "object",
        "properties": {"templates": {"type": "array"}, "total": {"type": "integer"}},
        "required": ["templates", "total"],
    }
    assert tools["ping"].outputSchema is None


@pytest.mark.anyio()
async def test_fastmcp_error_text_carries_structured_payload(
    server: MCPServer,
) -> None:
    """Backend failures surface the error type and message as JSON."""
    app = build_fastmcp_app(server)

    async with Client(app) as client:
        result = await client.call_tool(
            "documents.get", {"documentId": "doc-gone"}, raise_on_error=False
        )

    assert result.is_error is True
    text = result.content[0].text
    assert '"type": "NotFound"' in text
    assert "Document not found: doc-gone" in text
