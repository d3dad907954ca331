"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from documents_mcp.dispatcher import Dispatcher
from documents_mcp.server import MCPServer
from documents_mcp_server.application import Application, build_application
from documents_mcp_server.client import DocumentsClient
from documents_mcp_server.config import Settings
from documents_mcp_server.document_store import DocumentStore
from documents_mcp_server.documents import default_templates
from documents_mcp_server.logging_config import configure_logging

RpcCall = Callable[..., dict[str, Any]]


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Run ``@pytest.mark.anyio`` tests on asyncio, which FastMCP requires."""
    return "asyncio"


@pytest.fixture(autouse=True, scope="session")
def _stderr_logging() -> None:
    """Keep log records off stdout, which the CLI and stdio tests inspect."""
    configure_logging("WARNING")


@pytest.fixture()
def settings() -> Settings:
    """Mock-mode settings independent of the environment."""
    return Settings(
        host="127.0.0.1",
        port=8085,
        path="/mcp",
        cors_allowed_origins="http://localhost:5173,http://localhost:3000",
        log_level="INFO",
        log_json=False,
        mock_enabled=True,
        output_dir="./test-documents",
    )


@pytest.fixture()
def store() -> DocumentStore:
    """A store seeded with the default templates."""
    return DocumentStore(default_templates())


@pytest.fixture()
def client(store: DocumentStore) -> DocumentsClient:
    """A mock-mode backend client."""
    return DocumentsClient(store, mock_enabled=True, output_dir="./test-documents")


@pytest.fixture()
def application(settings: Settings) -> Iterator[Application]:
    """Fully wired application, closed after the test."""
    app = build_application(settings)
    yield app
    app.close()


@pytest.fixture()
def server(application: Application) -> MCPServer:
    return application.server


@pytest.fixture()
def dispatcher(application: Application) -> Dispatcher:
    return application.dispatcher


@pytest.fixture()
def rpc(dispatcher: Dispatcher) -> RpcCall:
    """Send a JSON-RPC request through the dispatcher and decode the reply."""

    def call(method: str, params: dict[str, Any] | None = None, **envelope: Any):
        request: dict[str, Any] = {"jsonrpc": "2.0", "id": 1, "method": method}
        if params is not None:
            request["params"] = params
        request.update(envelope)
        return json.loads(dispatcher.handle(json.dumps(request)))

    return call


@pytest.fixture()
def call_tool(rpc: RpcCall) -> RpcCall:
    """Invoke a tool via ``tools/call`` and decode the reply."""

    def call(name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        params: dict[str, Any] = {"name": name}
        if arguments is not None:
            params["arguments"] = arguments
        return rpc("tools/call", params)

    return call


def tool_payload(response: dict[str, Any]) -> Any:
    """Decode the JSON text carried in a successful tool response."""
    return json.loads(response["result"]["content"][0]["text"])
