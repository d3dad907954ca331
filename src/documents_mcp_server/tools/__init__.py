"""Tool registration helpers for the documents MCP server."""

from __future__ import annotations

from documents_mcp.tools import ToolDefinition
from documents_mcp_server.client import DocumentsClient
from documents_mcp_server.tools.generation import (
    generate_pdf_tool,
    generate_word_tool,
)
from documents_mcp_server.tools.ping import ping_tool
from documents_mcp_server.tools.retrieval import get_document_tool
from documents_mcp_server.tools.review import (
    brand_validate_tool,
    compliance_check_tool,
)
from documents_mcp_server.tools.templates import (
    apply_template_tool,
    list_templates_tool,
)


def build_tools(client: DocumentsClient) -> list[ToolDefinition]:
    """Instantiate all tool definitions backed by the provided client."""
    return [
        ping_tool(),
        generate_pdf_tool(client),
        generate_word_tool(client),
        compliance_check_tool(client),
        brand_validate_tool(client),
        apply_template_tool(client),
        list_templates_tool(client),
        get_document_tool(client),
    ]
