"""Template listing and application tools."""

from __future__ import annotations

from pydantic import Field

from documents_mcp.tools import ToolDefinition, ToolParameters
from documents_mcp_server.client import DocumentsClient
from documents_mcp_server.models import BidContentInput


class ApplyTemplateParams(ToolParameters):
    """Parameters for documents.template.apply."""

    template_id: str = Field(description="Template ID to apply")
    bid_content: BidContentInput = Field(
        description="Bid content with sections array"
    )


class ListTemplatesParams(ToolParameters):
    """Parameters for documents.templates.list."""

    format: str | None = Field(
        default=None, description="Filter by document format: PDF, WORD, or HTML"
    )


def apply_template_tool(client: DocumentsClient) -> ToolDefinition:
    """Create the documents.template.apply tool definition."""

    def handler(params: ApplyTemplateParams) -> dict[str, object]:
        result = client.apply_template(params.template_id, params.bid_content)
        return result.to_payload()

    return ToolDefinition(
        name="documents.template.apply",
        description=(
            "Apply a document template to bid content. Maps bid sections to "
            "template sections and identifies missing required sections."
        ),
        parameters_model=ApplyTemplateParams,
        handler=handler,
        output_schema={
            "templateId": "string",
            "templateName": "string",
            "sections": "array",
            "summary": "object",
        },
    )


def list_templates_tool(client: DocumentsClient) -> ToolDefinition:
    """Create the documents.templates.list tool definition."""

    def handler(params: ListTemplatesParams) -> dict[str, object]:
        return client.list_templates(params.format).to_payload()

    return ToolDefinition(
        name="documents.templates.list",
        description=(
            "List available document templates, optionally filtered by format "
            "(PDF, WORD, HTML)."
        ),
        parameters_model=ListTemplatesParams,
        handler=handler,
        output_schema={"templates": "array", "total": "integer"},
    )
