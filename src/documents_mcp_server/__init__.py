"""Model Context Protocol server for bid document tooling."""

from documents_mcp_server.application import Application, build_application
from documents_mcp_server.client import DocumentsClient
from documents_mcp_server.document_store import DocumentStore

__all__ = [
    "Application",
    "DocumentStore",
    "DocumentsClient",
    "build_application",
]
