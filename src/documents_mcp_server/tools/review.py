"""Compliance and brand review tools."""

from __future__ import annotations

from pydantic import Field

from documents_mcp.tools import ToolDefinition, ToolParameters
from documents_mcp_server.client import DocumentsClient
from documents_mcp_server.models import BidContentInput, BidSectionInput


class ComplianceCheckParams(ToolParameters):
    """Parameters for documents.compliance.check."""

    bid_id: str = Field(description="The bid identifier")
    requirements: list[str] = Field(
        description="List of tender requirements to check against"
    )
    bid_sections: list[BidSectionInput] = Field(
        description="Bid sections with name and content"
    )


class BrandValidateParams(ToolParameters):
    """Parameters for documents.brand.validate."""

    bid_id: str = Field(description="The bid identifier")
    bid_content: BidContentInput = Field(
        description="Bid content with title and sections array"
    )


def compliance_check_tool(client: DocumentsClient) -> ToolDefinition:
    """Create the documents.compliance.check tool definition."""

    def handler(params: ComplianceCheckParams) -> dict[str, object]:
        result = client.check_compliance(
            params.bid_id, params.requirements, params.bid_sections
        )
        return result.to_payload()

    return ToolDefinition(
        name="documents.compliance.check",
        description=(
            "Check bid content against tender requirements. Returns compliance "
            "status, score, and recommendations for missing requirements."
        ),
        parameters_model=ComplianceCheckParams,
        handler=handler,
        output_schema={
            "bidId": "string",
            "overallStatus": "string",
            "score": "number",
            "checks": "array",
            "recommendations": "array",
        },
    )


def brand_validate_tool(client: DocumentsClient) -> ToolDefinition:
    """Create the documents.brand.validate tool definition."""

    def handler(params: BrandValidateParams) -> dict[str, object]:
        return client.validate_brand(params.bid_id, params.bid_content).to_payload()

    return ToolDefinition(
        name="documents.brand.validate",
        description=(
            "Validate bid content against brand guidelines. Checks company name "
            "usage, forbidden terms, required sections, and title format."
        ),
        parameters_model=BrandValidateParams,
        handler=handler,
        output_schema={
            "bidId": "string",
            "overallStatus": "string",
            "score": "number",
            "checks": "array",
            "issues": "array",
        },
    )
