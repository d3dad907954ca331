"""Request dispatch for the JSON-RPC endpoint.

Each call to :meth:`Dispatcher.handle` takes one raw request through
parse, method lookup, tool lookup, argument validation, invocation and outcome
translation, and always returns exactly one serialized envelope.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import structlog

from documents_mcp.errors import (
    InvalidParamsError,
    JsonRpcErrorCode,
    ResourceNotFoundError,
)
from documents_mcp.protocol import (
    JsonRpcRequest,
    ParseFailure,
    encode_error,
    encode_success,
    parse_request,
)
from documents_mcp.server import MCPServer, ToolResult

logger = structlog.get_logger()

PROTOCOL_VERSION = "0.1.0"
SERVER_NAME = "doffin-documents-mcp"
SERVER_VERSION = "0.1.0"


def _display_name(name: object) -> str:
    """Render a requested tool name as the client wrote it (``null``, ``5``)."""
    return name if isinstance(name, str) else json.dumps(name)


class Dispatcher:
    """Route JSON-RPC requests to protocol methods and registered tools."""

    def __init__(
        self,
        server: MCPServer,
        *,
        server_name: str = SERVER_NAME,
        server_version: str = SERVER_VERSION,
        protocol_version: str = PROTOCOL_VERSION,
    ) -> None:
        """Bind the dispatcher to a populated tool registry."""
        self._server = server
        self._server_name = server_name
        self._server_version = server_version
        self._protocol_version = protocol_version
        self._methods: dict[str, Callable[[JsonRpcRequest], str]] = {
            "initialize": self._initialize,
            "initialized": self._initialized,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }

    def handle(self, raw: str | bytes) -> str:
        """Process one raw request and return the serialized response."""
        request = parse_request(raw)
        if isinstance(request, ParseFailure):
            logger.warning("Rejected malformed request", reason=request.reason)
            return encode_error(None, JsonRpcErrorCode.PARSE_ERROR, "Parse error")

        if not request.valid or request.method is None:
            return encode_error(
                request.id, JsonRpcErrorCode.INVALID_REQUEST, "Invalid Request"
            )

        logger.info("Handling MCP request", method=request.method, id=request.id)
        method_handler = self._methods.get(request.method)
        if method_handler is None:
            return encode_error(
                request.id, JsonRpcErrorCode.METHOD_NOT_FOUND, "Method not found"
            )
        return method_handler(request)

    def initialize_result(self) -> dict[str, Any]:
        """Return the protocol metadata sent in reply to ``initialize``."""
        return {
            "protocolVersion": self._protocol_version,
            "serverInfo": {
                "name": self._server_name,
                "version": self._server_version,
            },
            "capabilities": {"tools": {}},
        }

    def _initialize(self, request: JsonRpcRequest) -> str:
        logger.info("Client initializing MCP connection")
        return encode_success(request.id, self.initialize_result())

    def _initialized(self, request: JsonRpcRequest) -> str:
        logger.info("Client confirmed initialization complete")
        return encode_success(request.id, {})

    def _list_tools(self, request: JsonRpcRequest) -> str:
        return encode_success(request.id, self._server.to_catalog())

    def _call_tool(self, request: JsonRpcRequest) -> str:
        params = request.params if isinstance(request.params, dict) else {}
        name = params.get("name")
        tool = self._server.get_tool(name)
        if tool is None:
            return encode_error(
                request.id,
                JsonRpcErrorCode.METHOD_NOT_FOUND,
                f"Tool not found: {_display_name(name)}",
            )

        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}

        try:
            payload = tool.invoke(arguments)
            content = ToolResult(name=tool.name, payload=payload).to_content()
        except InvalidParamsError as exc:
            logger.warning("Invalid parameters for tool", tool=name, error=str(exc))
            return encode_error(
                request.id, JsonRpcErrorCode.INVALID_PARAMS, f"Invalid params: {exc}"
            )
        except ResourceNotFoundError as exc:
            # Shares -32602 with invalid params; existing clients match on it.
            logger.warning("Resource not found for tool", tool=name, error=str(exc))
            return encode_error(
                request.id, JsonRpcErrorCode.INVALID_PARAMS, f"Not found: {exc}"
            )
        except Exception as exc:
            logger.exception("Internal error executing tool", tool=name)
            return encode_error(
                request.id, JsonRpcErrorCode.INTERNAL_ERROR, f"Internal error: {exc}"
            )

        return encode_success(request.id, content)
