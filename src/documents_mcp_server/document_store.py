"""In-memory storage for generated documents and document templates."""

from __future__ import annotations

import threading
import uuid
from collections.abc import Iterable

import structlog

from documents_mcp.errors import raise_mcp_error
from documents_mcp_server.documents import DocumentTemplate, GeneratedDocument

logger = structlog.get_logger()


def new_document_id() -> str:
    """Return a fresh identifier of the form ``doc-1a2b3c4d``."""
    return f"doc-{uuid.uuid4().hex[:8]}"


class DocumentStore:
    """Thread-safe mapping of identifiers to documents and templates.

    Entries are immutable once stored, so a reader either sees a complete
    entry or none at all.
    """

    def __init__(self, templates: Iterable[DocumentTemplate] = ()) -> None:
        """Initialize the store, optionally seeding it with templates."""
        self._documents: dict[str, GeneratedDocument] = {}
        self._templates: dict[str, DocumentTemplate] = {}
        self._lock = threading.Lock()
        for template in templates:
            self.add_template(template)

    def add_document(self, document: GeneratedDocument) -> str:
        """Store a generated document and return its identifier."""
        with self._lock:
            self._documents[document.id] = document
        return document.id

    def get_document(self, document_id: str) -> GeneratedDocument:
        """Retrieve a document or raise a not-found error."""
        with self._lock:
            document = self._documents.get(document_id)
        if document is None:
            raise_mcp_error("NotFound", f"Document not found: {document_id}")
        return document

    def add_template(self, template: DocumentTemplate) -> None:
        """Register a template, replacing any template with the same id."""
        with self._lock:
            self._templates[template.id] = template

    def find_template(self, template_id: str) -> DocumentTemplate | None:
        """Return the template with ``template_id``, or ``None``."""
        with self._lock:
            return self._templates.get(template_id)

    def get_template(self, template_id: str) -> DocumentTemplate:
        """Retrieve a template or raise a not-found error."""
        template = self.find_template(template_id)
        if template is None:
            raise_mcp_error("NotFound", f"Template not found: {template_id}")
        return template

    def templates(self) -> list[DocumentTemplate]:
        """Return a snapshot of all templates in insertion order."""
        with self._lock:
            return list(self._templates.values())

    def close(self) -> None:
        """Drop all stored documents and templates."""
        with self._lock:
            dropped = len(self._documents)
            self._documents.clear()
            self._templates.clear()
        logger.info("Document store closed", dropped_documents=dropped)
