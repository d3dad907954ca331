"""Document backend behind the MCP tools.

The client estimates document properties, runs keyword-based compliance and
brand checks, and maps bid content onto templates. Nothing is rendered; in mock
mode no file path is recorded either.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import PurePosixPath

import structlog

from documents_mcp.errors import raise_mcp_error
from documents_mcp_server.document_store import DocumentStore, new_document_id
from documents_mcp_server.documents import (
    BrandStatus,
    ComplianceStatus,
    DocumentFormat,
    DocumentMetadata,
    DocumentSection,
    GeneratedDocument,
    estimate_file_size,
    estimate_page_count,
    format_file_size,
    sanitize_file_name,
)
from documents_mcp_server.models import (
    AppliedSection,
    AppliedTemplateResult,
    BidContentInput,
    BidSectionInput,
    BrandCheckEntry,
    BrandIssue,
    BrandSummary,
    BrandValidationResult,
    ComplianceCheckEntry,
    ComplianceCheckResult,
    DocumentDetailsResult,
    DocumentMetadataResult,
    GeneratedDocumentResult,
    MetadataInput,
    SectionInput,
    SectionSummary,
    StoredSectionSummary,
    TemplateListEntry,
    TemplateListResult,
    TemplateStylingResult,
    TemplateSummary,
)

logger = structlog.get_logger()

COMPANY_NAME = "Webstep"
FORBIDDEN_TERMS = ("guarantee", "promise", "100%")
REQUIRED_SECTIONS = ("Company Profile", "Contact Information")

_CATEGORY_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("security", "gdpr"), "Security"),
    (("team", "resource"), "Resources"),
    (("price", "cost"), "Commercial"),
    (("quality", "test"), "Quality"),
    (("deliver", "timeline"), "Delivery"),
)
_PHONE_NUMBER = re.compile(r"\d{8}")


def categorize_requirement(requirement: str) -> str:
    """Assign a requirement to a coarse category by keyword."""
    lowered = requirement.lower()
    for keywords, category in _CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return "General"


def _percentage(score: float) -> str:
    return f"{int(score * 100)}%"


def _metadata_result(metadata: DocumentMetadata) -> DocumentMetadataResult:
    return DocumentMetadataResult(
        title=metadata.title,
        author=metadata.author,
        company=metadata.company,
        version=metadata.version,
        page_count=metadata.page_count,
        word_count=metadata.word_count,
    )


class DocumentsClient:
    """Business operations exposed through the document tools."""

    def __init__(
        self,
        store: DocumentStore,
        *,
        mock_enabled: bool = True,
        output_dir: str = "./generated-documents",
    ) -> None:
        """Create a client that keeps its documents in ``store``."""
        self._store = store
        self._mock_enabled = mock_enabled
        self._output_dir = output_dir
        if mock_enabled:
            logger.info("Documents client running in mock mode")
        else:
            logger.info("Documents client running in live mode", output_dir=output_dir)

    def generate_pdf(
        self,
        bid_id: str,
        title: str,
        sections: Sequence[SectionInput],
        metadata: MetadataInput | None = None,
        template_id: str | None = None,
    ) -> GeneratedDocumentResult:
        """Generate a PDF document from bid content."""
        return self._generate(
            DocumentFormat.PDF, bid_id, title, sections, metadata, template_id
        )

    def generate_word(
        self,
        bid_id: str,
        title: str,
        sections: Sequence[SectionInput],
        metadata: MetadataInput | None = None,
        template_id: str | None = None,
    ) -> GeneratedDocumentResult:
        """Generate a Word document from bid content."""
        return self._generate(
            DocumentFormat.WORD, bid_id, title, sections, metadata, template_id
        )

    def _generate(
        self,
        document_format: DocumentFormat,
        bid_id: str,
        title: str,
        sections: Sequence[SectionInput],
        metadata: MetadataInput | None,
        template_id: str | None,
    ) -> GeneratedDocumentResult:
        if template_id is not None and self._store.find_template(template_id) is None:
            logger.warning(
                "Generating without unknown template", template_id=template_id
            )

        metadata = metadata or MetadataInput()
        file_name = (
            f"{sanitize_file_name(title)}_{bid_id}.{document_format.extension}"
        )
        document_sections = tuple(
            DocumentSection(
                name=section.name if section.name is not None else f"Section {index}",
                content=section.content or "",
                order=section.order if section.order is not None else index,
                page_break_before=bool(section.page_break_before),
            )
            for index, section in enumerate(sections, start=1)
        )
        word_count = sum(section.word_count for section in document_sections)

        document = GeneratedDocument(
            id=new_document_id(),
            bid_id=bid_id,
            format=document_format,
            file_name=file_name,
            file_path=(
                None
                if self._mock_enabled
                else str(PurePosixPath(self._output_dir) / file_name)
            ),
            file_size=estimate_file_size(word_count, document_format),
            generated_at=datetime.now(),
            generated_by=metadata.author or "system",
            sections=document_sections,
            metadata=DocumentMetadata(
                title=title,
                author=metadata.author or "Webstep",
                company=metadata.company or "Webstep AS",
                version=metadata.version or "1.0",
                language=metadata.language or "no",
                page_count=estimate_page_count(word_count),
                word_count=word_count,
            ),
        )
        self._store.add_document(document)
        logger.info(
            "Generated document",
            document_id=document.id,
            format=document_format.value,
            file_name=file_name,
        )

        return GeneratedDocumentResult(
            document_id=document.id,
            bid_id=document.bid_id,
            format=document.format,
            file_name=document.file_name,
            file_size=document.file_size,
            file_size_formatted=format_file_size(document.file_size),
            generated_at=document.generated_at,
            metadata=_metadata_result(document.metadata),
            sections=[
                SectionSummary(name=section.name, order=section.order)
                for section in document_sections
            ],
            message=(
                "Document generated (mock mode - no file created)"
                if self._mock_enabled
                else "Document generated successfully"
            ),
        )

    def check_compliance(
        self,
        bid_id: str,
        requirements: Sequence[str],
        bid_sections: Sequence[BidSectionInput],
    ) -> ComplianceCheckResult:
        """Check bid sections against tender requirements."""
        contents = {
            (section.name or ""): (section.content or "") for section in bid_sections
        }
        all_content = " ".join(contents.values()).lower()

        checks: list[ComplianceCheckEntry] = []
        missing: list[str] = []
        for requirement in requirements:
            lowered = requirement.lower()
            matching_section = next(
                (
                    name
                    for name, content in contents.items()
                    if lowered in content.lower() or lowered in name.lower()
                ),
                None,
            )
            if lowered in all_content or matching_section is not None:
                checks.append(
                    ComplianceCheckEntry(
                        requirement=requirement,
                        category=categorize_requirement(requirement),
                        status=ComplianceStatus.COMPLIANT,
                        details="Requirement addressed in bid content",
                        section=matching_section,
                    )
                )
            else:
                checks.append(
                    ComplianceCheckEntry(
                        requirement=requirement,
                        category=categorize_requirement(requirement),
                        status=ComplianceStatus.NON_COMPLIANT,
                        details="Requirement not found in bid content",
                    )
                )
                missing.append(requirement)

        checks.extend(self._standard_compliance_checks(contents))

        compliant = sum(
            1 for check in checks if check.status is ComplianceStatus.COMPLIANT
        )
        score = compliant / len(checks) if checks else 0.0
        if score >= 0.9:
            overall = ComplianceStatus.COMPLIANT
        elif score >= 0.6:
            overall = ComplianceStatus.PARTIAL
        else:
            overall = ComplianceStatus.NON_COMPLIANT

        logger.info(
            "Checked compliance", bid_id=bid_id, score=score, status=overall.value
        )
        return ComplianceCheckResult(
            bid_id=bid_id,
            checked_at=datetime.now(),
            overall_status=overall,
            score=score,
            score_percentage=_percentage(score),
            total_checks=len(checks),
            compliant_checks=compliant,
            checks=checks,
            missing_requirements=missing,
            recommendations=self._compliance_recommendations(checks, missing),
        )

    @staticmethod
    def _standard_compliance_checks(
        contents: dict[str, str],
    ) -> list[ComplianceCheckEntry]:
        checks: list[ComplianceCheckEntry] = []

        if any(
            "summary" in name.lower() or "executive" in name.lower()
            for name in contents
        ):
            checks.append(
                ComplianceCheckEntry(
                    requirement="Executive Summary",
                    category="Structure",
                    status=ComplianceStatus.COMPLIANT,
                    details="Executive summary section present",
                )
            )
        else:
            checks.append(
                ComplianceCheckEntry(
                    requirement="Executive Summary",
                    category="Structure",
                    status=ComplianceStatus.PARTIAL,
                    details="Executive summary section recommended",
                )
            )

        all_content = " ".join(contents.values()).lower()
        has_phone = (
            "telefon" in all_content
            or "phone" in all_content
            or _PHONE_NUMBER.search(all_content) is not None
        )
        if "@" in all_content and has_phone:
            checks.append(
                ComplianceCheckEntry(
                    requirement="Contact Information",
                    category="Structure",
                    status=ComplianceStatus.COMPLIANT,
                    details="Contact details found",
                )
            )
        else:
            checks.append(
                ComplianceCheckEntry(
                    requirement="Contact Information",
                    category="Structure",
                    status=ComplianceStatus.PARTIAL,
                    details="Contact information may be incomplete",
                )
            )
        return checks

    @staticmethod
    def _compliance_recommendations(
        checks: list[ComplianceCheckEntry], missing: list[str]
    ) -> list[str]:
        recommendations: list[str] = []

        if missing:
            listed = ", ".join(missing[:3])
            more = f" and {len(missing) - 3} more" if len(missing) > 3 else ""
            recommendations.append(f"Address missing requirements: {listed}{more}")

        partial = [
            check for check in checks if check.status is ComplianceStatus.PARTIAL
        ]
        if partial:
            names = ", ".join(check.requirement for check in partial[:2])
            recommendations.append(f"Strengthen sections for: {names}")

        non_compliant = [
            check for check in checks if check.status is ComplianceStatus.NON_COMPLIANT
        ]
        if len(non_compliant) > len(checks) * 0.3:
            recommendations.append(
                "Review tender requirements carefully - significant gaps identified"
            )

        if not recommendations:
            recommendations.append("Bid appears well-aligned with requirements")
        return recommendations

    def validate_brand(
        self, bid_id: str, bid_content: BidContentInput
    ) -> BrandValidationResult:
        """Validate bid content against the brand guidelines."""
        title = bid_content.title or ""
        sections = bid_content.sections
        all_content = " ".join(
            section.content for section in sections if section.content is not None
        ).lower()

        checks: list[BrandCheckEntry] = []
        issues: list[BrandIssue] = []

        mentions = all_content.count(COMPANY_NAME.lower())
        if mentions > 0:
            checks.append(
                BrandCheckEntry(
                    aspect="Company Name",
                    status=BrandStatus.VALID,
                    details=f"Company name '{COMPANY_NAME}' mentioned {mentions} times",
                )
            )
        else:
            checks.append(
                BrandCheckEntry(
                    aspect="Company Name",
                    status=BrandStatus.WARNINGS,
                    details="Company name not found in content",
                )
            )
            issues.append(
                BrandIssue(
                    type="missing_branding",
                    description="Company name not mentioned in bid",
                    location=None,
                    suggestion="Add company name in introduction and relevant sections",
                )
            )

        found_terms = [term for term in FORBIDDEN_TERMS if term.lower() in all_content]
        for term in found_terms:
            checks.append(
                BrandCheckEntry(
                    aspect=f"Forbidden Term: {term}",
                    status=BrandStatus.INVALID,
                    details=f"Found forbidden term '{term}' in content",
                )
            )
            issues.append(
                BrandIssue(
                    type="forbidden_term",
                    description=f"Forbidden term '{term}' used",
                    location=None,
                    suggestion=f"Replace '{term}' with more appropriate language",
                )
            )
        if not found_terms:
            checks.append(
                BrandCheckEntry(
                    aspect="Forbidden Terms",
                    status=BrandStatus.VALID,
                    details="No forbidden terms found",
                )
            )

        section_names = [
            section.name.lower() for section in sections if section.name is not None
        ]
        for required in REQUIRED_SECTIONS:
            lowered = required.lower()
            if any(lowered in name or name in lowered for name in section_names):
                checks.append(
                    BrandCheckEntry(
                        aspect=f"Required Section: {required}",
                        status=BrandStatus.VALID,
                        details="Section present",
                    )
                )
            else:
                checks.append(
                    BrandCheckEntry(
                        aspect=f"Required Section: {required}",
                        status=BrandStatus.WARNINGS,
                        details="Section missing or not clearly labeled",
                    )
                )
                issues.append(
                    BrandIssue(
                        type="missing_section",
                        description=f"Required section '{required}' not found",
                        location=None,
                        suggestion=f"Add a section for '{required}'",
                    )
                )

        if title.strip() and len(title) >= 10:
            checks.append(
                BrandCheckEntry(
                    aspect="Title Format",
                    status=BrandStatus.VALID,
                    details="Title is properly formatted",
                )
            )
        else:
            checks.append(
                BrandCheckEntry(
                    aspect="Title Format",
                    status=BrandStatus.WARNINGS,
                    details="Title may be too short or missing",
                )
            )
            issues.append(
                BrandIssue(
                    type="title_format",
                    description="Title appears incomplete",
                    location="Title",
                    suggestion="Ensure title clearly describes the bid",
                )
            )

        invalid = sum(1 for check in checks if check.status is BrandStatus.INVALID)
        warnings = sum(1 for check in checks if check.status is BrandStatus.WARNINGS)
        valid = sum(1 for check in checks if check.status is BrandStatus.VALID)
        if invalid:
            overall = BrandStatus.INVALID
        elif warnings:
            overall = BrandStatus.WARNINGS
        else:
            overall = BrandStatus.VALID
        score = (valid + warnings * 0.5) / len(checks) if checks else 1.0

        logger.info("Validated brand", bid_id=bid_id, status=overall.value)
        return BrandValidationResult(
            bid_id=bid_id,
            checked_at=datetime.now(),
            overall_status=overall,
            score=score,
            score_percentage=_percentage(score),
            checks=checks,
            issues=issues,
            summary=BrandSummary(valid=valid, warnings=warnings, invalid=invalid),
        )

    def apply_template(
        self, template_id: str, bid_content: BidContentInput
    ) -> AppliedTemplateResult:
        """Map bid sections onto the sections of a template."""
        template = self._store.get_template(template_id)

        applied: list[AppliedSection] = []
        for template_section in sorted(template.sections, key=lambda s: s.order):
            template_name = template_section.name.lower()
            match = next(
                (
                    section
                    for section in bid_content.sections
                    if section.name
                    and (
                        template_name in section.name.lower()
                        or section.name.lower() in template_name
                        or template_section.id.lower() == section.name.lower()
                    )
                ),
                None,
            )
            if match is not None:
                status = "mapped"
            elif template_section.required:
                status = "missing"
            else:
                status = "optional"
            if match is not None and match.content is not None:
                content = match.content
            else:
                content = template_section.default_content or ""
            applied.append(
                AppliedSection(
                    template_section=template_section.name,
                    template_section_id=template_section.id,
                    order=template_section.order,
                    required=template_section.required,
                    content=content,
                    status=status,
                )
            )

        missing = [section for section in applied if section.status == "missing"]
        return AppliedTemplateResult(
            template_id=template.id,
            template_name=template.name,
            format=template.format,
            sections=applied,
            styling=TemplateStylingResult(
                font_family=template.styling.font_family,
                font_size=template.styling.font_size,
                header_color=template.styling.header_color,
                logo_position=template.styling.logo_position,
            ),
            summary=TemplateSummary(
                total_sections=len(template.sections),
                mapped_sections=sum(1 for s in applied if s.status == "mapped"),
                missing_sections=len(missing),
                optional_sections=sum(1 for s in applied if s.status == "optional"),
            ),
            warnings=[
                f"Required section '{section.template_section}' has no content"
                for section in missing
            ],
        )

    def list_templates(self, document_format: str | None = None) -> TemplateListResult:
        """List templates, optionally restricted to one format."""
        templates = self._store.templates()
        if document_format is not None and document_format.strip():
            try:
                wanted = DocumentFormat(document_format.strip().upper())
            except ValueError:
                valid = ", ".join(member.value for member in DocumentFormat)
                raise_mcp_error(
                    "InvalidParams",
                    f"Invalid format: {document_format}. Valid values: {valid}",
                )
            templates = [template for template in templates if template.format is wanted]

        return TemplateListResult(
            templates=[
                TemplateListEntry(
                    id=template.id,
                    name=template.name,
                    description=template.description,
                    format=template.format,
                    section_count=len(template.sections),
                )
                for template in templates
            ],
            total=len(templates),
        )

    def get_document(self, document_id: str) -> DocumentDetailsResult:
        """Return the stored details of a generated document."""
        document = self._store.get_document(document_id)
        return DocumentDetailsResult(
            document_id=document.id,
            bid_id=document.bid_id,
            format=document.format,
            file_name=document.file_name,
            file_path=document.file_path,
            file_size=document.file_size,
            file_size_formatted=format_file_size(document.file_size),
            generated_at=document.generated_at,
            generated_by=document.generated_by,
            metadata=_metadata_result(document.metadata),
            sections=[
                StoredSectionSummary(
                    name=section.name,
                    order=section.order,
                    content_length=len(section.content),
                )
                for section in document.sections
            ],
        )
