"""Tool for fetching previously generated documents."""

from __future__ import annotations

from pydantic import Field

from documents_mcp.tools import ToolDefinition, ToolParameters
from documents_mcp_server.client import DocumentsClient


class GetDocumentParams(ToolParameters):
    """Parameters for documents.get."""

    document_id: str = Field(description="The document identifier")


def get_document_tool(client: DocumentsClient) -> ToolDefinition:
    """Create the documents.get tool definition."""

    def handler(params: GetDocumentParams) -> dict[str, object]:
        return client.get_document(params.document_id).to_payload()

    return ToolDefinition(
        name="documents.get",
        description=(
            "Get a generated document by its ID. Returns document metadata and "
            "section information."
        ),
        parameters_model=GetDocumentParams,
        handler=handler,
        output_schema={
            "documentId": "string",
            "bidId": "string",
            "format": "string",
            "metadata": "object",
            "sections": "array",
        },
    )
