"""Tests for the FastAPI transport."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from documents_mcp_server.application import Application
from documents_mcp_server.http_app import create_app


@pytest.fixture()
def http_client(application: Application) -> Iterator[TestClient]:
    with TestClient(create_app(application)) as client:
        yield client


def test_post_returns_json_rpc_envelope(http_client: TestClient) -> None:
    """A JSON-RPC request posted to the endpoint is answered in the body."""
    response = http_client.post(
        "/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"}
    )

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert len(response.json()["result"]["tools"]) == 8


def test_protocol_errors_use_http_200(http_client: TestClient) -> None:
    """Parse errors travel inside a normal 200 response."""
    response = http_client.post(
        "/mcp", content=b"{broken", headers={"content-type": "application/json"}
    )

    assert response.status_code == 200
    assert response.json()["error"]["code"] == -32700


def test_tool_call_over_http(http_client: TestClient) -> None:
    """Tools can be invoked end to end over HTTP."""
    response = http_client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": "abc",
            "method": "tools/call",
            "params": {"name": "ping", "arguments": {}},
        },
    )

    assert response.json() == {
        "jsonrpc": "2.0",
        "id": "abc",
        "result": {"content": [{"type": "text", "text": "pong from documents-mcp"}]},
    }


def test_cors_preflight_allows_configured_origin(http_client: TestClient) -> None:
    """Configured origins may POST cross-origin."""
    response = http_client.options(
        "/mcp",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-max-age"] == "3600"


def test_cors_rejects_unknown_origin(http_client: TestClient) -> None:
    """Origins outside the allow list get no CORS grant."""
    response = http_client.options(
        "/mcp",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_health_endpoint(http_client: TestClient) -> None:
    assert http_client.get("/health").json() == {"status": "ok"}


def test_custom_path_is_honored(application: Application) -> None:
    """The endpoint path comes from the settings."""
    application.settings = application.settings.model_copy(update={"path": "/rpc"})

    with TestClient(create_app(application)) as client:
        ok = client.post("/rpc", json={"jsonrpc": "2.0", "id": 1, "method": "initialized"})
        missing = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1})

    assert ok.json()["result"] == {}
    assert missing.status_code == 404


def test_deeply_nested_body_is_a_parse_error(http_client: TestClient) -> None:
    """Bodies too deeply nested to decode still get a JSON-RPC envelope."""
    response = http_client.post(
        "/mcp",
        content=("[" * 200_000 + "]" * 200_000).encode(),
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 200
    assert response.json()["error"]["code"] == -32700
