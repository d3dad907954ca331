"""Wiring of the store, backend client, tool registry and dispatcher."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from documents_mcp.dispatcher import Dispatcher
from documents_mcp.server import MCPServer
from documents_mcp_server.client import DocumentsClient
from documents_mcp_server.config import Settings, get_settings
from documents_mcp_server.document_store import DocumentStore
from documents_mcp_server.documents import default_templates
from documents_mcp_server.tools import build_tools

logger = structlog.get_logger()


@dataclass
class Application:
    """Process-wide objects, created once at startup."""

    settings: Settings
    store: DocumentStore
    client: DocumentsClient
    server: MCPServer
    dispatcher: Dispatcher

    def close(self) -> None:
        """Release the document store."""
        self.store.close()


def build_application(settings: Settings | None = None) -> Application:
    """Create the store, backend client, registry and dispatcher."""
    settings = settings or get_settings()
    store = DocumentStore(default_templates() if settings.mock_enabled else ())
    client = DocumentsClient(
        store, mock_enabled=settings.mock_enabled, output_dir=settings.output_dir
    )
    server = MCPServer()
    server.register_tools(*build_tools(client))
    logger.info(
        "Initialized documents MCP server",
        tools=len(server.available_tools()),
        templates=len(store.templates()),
    )
    return Application(
        settings=settings,
        store=store,
        client=client,
        server=server,
        dispatcher=Dispatcher(server),
    )
