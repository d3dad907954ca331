"""Tools generating PDF and Word documents from bid content."""

from __future__ import annotations

from pydantic import Field

from documents_mcp.tools import ToolDefinition, ToolParameters
from documents_mcp_server.client import DocumentsClient
from documents_mcp_server.models import MetadataInput, SectionInput

_GENERATED_DOCUMENT_SCHEMA = {
    "documentId": "string",
    "bidId": "string",
    "format": "string",
    "fileName": "string",
    "fileSize": "integer",
    "metadata": "object",
    "sections": "array",
}


class GenerateDocumentParams(ToolParameters):
    """Parameters shared by the PDF and Word generation tools."""

    bid_id: str = Field(description="The bid identifier")
    title: str = Field(description="Document title")
    sections: list[SectionInput] = Field(
        description=(
            "Document sections with name, content, order, and optional "
            "pageBreakBefore"
        )
    )
    metadata: MetadataInput | None = Field(
        default=None,
        description="Document metadata (author, company, version, language)",
    )
    template_id: str | None = Field(
        default=None, description="Optional template ID to use for styling"
    )


def generate_pdf_tool(client: DocumentsClient) -> ToolDefinition:
    """Create the documents.generate.pdf tool definition."""

    def handler(params: GenerateDocumentParams) -> dict[str, object]:
        result = client.generate_pdf(
            params.bid_id,
            params.title,
            params.sections,
            params.metadata,
            params.template_id,
        )
        return result.to_payload()

    return ToolDefinition(
        name="documents.generate.pdf",
        description=(
            "Generate a PDF document from bid content. Returns document metadata "
            "including file size, page count, and sections."
        ),
        parameters_model=GenerateDocumentParams,
        handler=handler,
        output_schema=_GENERATED_DOCUMENT_SCHEMA,
    )


def generate_word_tool(client: DocumentsClient) -> ToolDefinition:
    """Create the documents.generate.word tool definition."""

    def handler(params: GenerateDocumentParams) -> dict[str, object]:
        result = client.generate_word(
            params.bid_id,
            params.title,
            params.sections,
            params.metadata,
            params.template_id,
        )
        return result.to_payload()

    return ToolDefinition(
        name="documents.generate.word",
        description=(
            "Generate a Word document (.docx) from bid content. Returns document "
            "metadata including file size, page count, and sections."
        ),
        parameters_model=GenerateDocumentParams,
        handler=handler,
        output_schema=_GENERATED_DOCUMENT_SCHEMA,
    )
