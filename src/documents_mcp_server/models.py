"""Wire-facing request fragments and result payloads for the document tools.

Result models serialize with camelCase keys via :meth:`ResultModel.to_payload`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from documents_mcp.tools import ToolParameters
from documents_mcp_server.documents import (
    BrandStatus,
    ComplianceStatus,
    DocumentFormat,
)


class SectionInput(ToolParameters):
    """Section supplied to the generate tools; every field is optional."""

    name: str | None = None
    content: str | None = None
    order: int | None = None
    page_break_before: bool | None = None


class MetadataInput(ToolParameters):
    """Optional document metadata supplied to the generate tools."""

    author: str | None = None
    company: str | None = None
    version: str | None = None
    language: str | None = None


class BidSectionInput(ToolParameters):
    """A named block of bid text."""

    name: str | None = None
    content: str | None = None


class BidContentInput(ToolParameters):
    """Bid content checked by the brand and template tools."""

    title: str | None = None
    sections: list[BidSectionInput] = Field(default_factory=list)


class ResultModel(BaseModel):
    """Base class for tool result payloads."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Dump the result as JSON-compatible data with camelCase keys."""
        return self.model_dump(by_alias=True, mode="json")


class DocumentMetadataResult(ResultModel):
    title: str
    author: str
    company: str
    version: str
    page_count: int
    word_count: int


class SectionSummary(ResultModel):
    name: str
    order: int


class GeneratedDocumentResult(ResultModel):
    """Returned by ``documents.generate.pdf`` and ``documents.generate.word``."""

    document_id: str
    bid_id: str
    format: DocumentFormat
    file_name: str
    file_size: int
    file_size_formatted: str
    generated_at: datetime
    metadata: DocumentMetadataResult
    sections: list[SectionSummary]
    status: str = "generated"
    message: str


class StoredSectionSummary(ResultModel):
    name: str
    order: int
    content_length: int


class DocumentDetailsResult(ResultModel):
    """Returned by ``documents.get``."""

    document_id: str
    bid_id: str
    format: DocumentFormat
    file_name: str
    file_path: str | None
    file_size: int
    file_size_formatted: str
    generated_at: datetime
    generated_by: str
    metadata: DocumentMetadataResult
    sections: list[StoredSectionSummary]


class ComplianceCheckEntry(ResultModel):
    requirement: str
    category: str
    status: ComplianceStatus
    details: str
    section: str | None = None


class ComplianceCheckResult(ResultModel):
    """Returned by ``documents.compliance.check``."""

    bid_id: str
    checked_at: datetime
    overall_status: ComplianceStatus
    score: float
    score_percentage: str
    total_checks: int
    compliant_checks: int
    checks: list[ComplianceCheckEntry]
    missing_requirements: list[str]
    recommendations: list[str]


class BrandCheckEntry(ResultModel):
    aspect: str
    status: BrandStatus
    details: str


class BrandIssue(ResultModel):
    type: str
    description: str
    location: str | None
    suggestion: str


class BrandSummary(ResultModel):
    valid: int
    warnings: int
    invalid: int


class BrandValidationResult(ResultModel):
    """Returned by ``documents.brand.validate``."""

    bid_id: str
    checked_at: datetime
    overall_status: BrandStatus
    score: float
    score_percentage: str
    checks: list[BrandCheckEntry]
    issues: list[BrandIssue]
    summary: BrandSummary


class AppliedSection(ResultModel):
    template_section: str
    template_section_id: str
    order: int
    required: bool
    content: str
    status: str


class TemplateStylingResult(ResultModel):
    font_family: str
    font_size: int
    header_color: str
    logo_position: str | None


class TemplateSummary(ResultModel):
    total_sections: int
    mapped_sections: int
    missing_sections: int
    optional_sections: int


class AppliedTemplateResult(ResultModel):
    """Returned by ``documents.template.apply``."""

    template_id: str
    template_name: str
    format: DocumentFormat
    sections: list[AppliedSection]
    styling: TemplateStylingResult
    summary: TemplateSummary
    warnings: list[str]


class TemplateListEntry(ResultModel):
    id: str
    name: str
    description: str
    format: DocumentFormat
    section_count: int


class TemplateListResult(ResultModel):
    """Returned by ``documents.templates.list``."""

    templates: list[TemplateListEntry]
    total: int
