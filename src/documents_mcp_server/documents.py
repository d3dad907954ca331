"""Domain models for generated documents and templates.

These are the objects the backend keeps in its store. Wire-facing request and
response shapes live in :mod:`documents_mcp_server.models`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class DocumentFormat(str, Enum):
    """Output formats the backend knows how to produce."""

    PDF = "PDF"
    WORD = "WORD"
    HTML = "HTML"

    @property
    def extension(self) -> str:
        """File extension used for generated files."""
        return {"PDF": "pdf", "WORD": "docx", "HTML": "html"}[self.value]


class ComplianceStatus(str, Enum):
    COMPLIANT = "COMPLIANT"
    PARTIAL = "PARTIAL"
    NON_COMPLIANT = "NON_COMPLIANT"


class BrandStatus(str, Enum):
    VALID = "VALID"
    WARNINGS = "WARNINGS"
    INVALID = "INVALID"


@dataclass(frozen=True)
class DocumentSection:
    """A section of a generated document."""

    name: str
    content: str
    order: int
    page_break_before: bool = False

    @property
    def word_count(self) -> int:
        """Number of whitespace-separated words in the content."""
        return len(self.content.split())


@dataclass(frozen=True)
class DocumentMetadata:
    """Descriptive metadata recorded with a generated document."""

    title: str
    author: str
    company: str
    version: str
    language: str
    page_count: int
    word_count: int


@dataclass(frozen=True)
class GeneratedDocument:
    """A document produced by one of the generate tools."""

    id: str
    bid_id: str
    format: DocumentFormat
    file_name: str
    file_path: str | None
    file_size: int
    generated_at: datetime
    generated_by: str
    sections: tuple[DocumentSection, ...]
    metadata: DocumentMetadata


@dataclass(frozen=True)
class TemplateSection:
    """Section slot declared by a document template."""

    id: str
    name: str
    required: bool
    order: int
    default_content: str | None = None


@dataclass(frozen=True)
class DocumentMargins:
    top: int
    bottom: int
    left: int
    right: int


@dataclass(frozen=True)
class DocumentStyling:
    """Visual styling applied by a template."""

    font_family: str
    font_size: int
    header_color: str
    logo_position: str | None
    margins: DocumentMargins


@dataclass(frozen=True)
class DocumentTemplate:
    """Template describing the expected structure of a bid document."""

    id: str
    name: str
    description: str
    format: DocumentFormat
    sections: tuple[TemplateSection, ...]
    styling: DocumentStyling


_UNSAFE_FILE_CHARS = re.compile(r"[^a-zA-Z0-9\-_]")

WORDS_PER_PAGE = 350


def sanitize_file_name(name: str) -> str:
    """Replace characters unsafe in file names and cap the length at 50."""
    return _UNSAFE_FILE_CHARS.sub("_", name)[:50]


def estimate_file_size(word_count: int, document_format: DocumentFormat) -> int:
    """Approximate the rendered file size in bytes."""
    if document_format is DocumentFormat.PDF:
        return word_count * 8 + 50_000
    if document_format is DocumentFormat.WORD:
        return word_count * 10 + 30_000
    return word_count * 12 + 5_000


def estimate_page_count(word_count: int) -> int:
    """Approximate the number of pages, never fewer than one."""
    return max(1, word_count // WORDS_PER_PAGE)


def format_file_size(size: int) -> str:
    """Render a byte count for humans (``12 KB``, ``3 MB``)."""
    if size >= 1_000_000:
        return f"{size // 1_000_000} MB"
    if size >= 1_000:
        return f"{size // 1_000} KB"
    return f"{size} bytes"


def default_templates() -> list[DocumentTemplate]:
    """Templates available when the backend runs in mock mode."""
    return [
        DocumentTemplate(
            id="template-pdf-standard",
            name="Standard Bid PDF",
            description="Standard PDF template for public sector bids",
            format=DocumentFormat.PDF,
            sections=(
                TemplateSection("cover", "Cover Page", True, 1),
                TemplateSection("toc", "Table of Contents", True, 2),
                TemplateSection("executive-summary", "Executive Summary", True, 3),
                TemplateSection("company-profile", "Company Profile", True, 4),
                TemplateSection("solution", "Proposed Solution", True, 5),
                TemplateSection("team", "Team Composition", True, 6),
                TemplateSection("methodology", "Methodology", True, 7),
                TemplateSection("pricing", "Pricing", False, 8),
                TemplateSection("references", "References", False, 9),
                TemplateSection("appendices", "Appendices", False, 10),
            ),
            styling=DocumentStyling(
                font_family="Arial",
                font_size=11,
                header_color="#003366",
                logo_position="top-right",
                margins=DocumentMargins(25, 25, 25, 25),
            ),
        ),
        DocumentTemplate(
            id="template-word-standard",
            name="Standard Bid Word Document",
            description="Standard Word template for editable bid documents",
            format=DocumentFormat.WORD,
            sections=(
                TemplateSection("cover", "Cover Page", True, 1),
                TemplateSection("executive-summary", "Executive Summary", True, 2),
                TemplateSection(
                    "requirements", "Understanding of Requirements", True, 3
                ),
                TemplateSection("solution", "Proposed Solution", True, 4),
                TemplateSection("team", "Team and CVs", True, 5),
                TemplateSection("delivery", "Delivery Approach", True, 6),
                TemplateSection("quality", "Quality Assurance", True, 7),
                TemplateSection("pricing", "Commercial Terms", False, 8),
            ),
            styling=DocumentStyling(
                font_family="Calibri",
                font_size=11,
                header_color="#003366",
                logo_position="header",
                margins=DocumentMargins(20, 20, 25, 25),
            ),
        ),
    ]
