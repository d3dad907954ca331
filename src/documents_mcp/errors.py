"""Custom error types for MCP tooling."""

from __future__ import annotations

from enum import IntEnum
from typing import NoReturn, TypedDict


class JsonRpcErrorCode(IntEnum):
    """Error codes emitted in JSON-RPC error envelopes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class MCPErrorPayload(TypedDict):
    """Structured JSON payload for MCP errors."""

    error: dict[str, object | None]


class MCPError(Exception):
    """Structured MCP error containing a JSON-friendly payload."""

    def __init__(
        self, error_type: str, message: str, details: object | None = None
    ) -> None:
        """Create a structured MCP error payload."""
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.error: MCPErrorPayload = {
            "error": {
                "type": error_type,
                "message": message,
                "details": details,
            }
        }

    def to_dict(self) -> MCPErrorPayload:
        """Return the structured error payload."""
        return self.error


class InvalidParamsError(MCPError):
    """A caller-supplied argument is missing or has the wrong shape."""

    def __init__(self, message: str, details: object | None = None) -> None:
        """Create an invalid-parameters error naming the offending parameter."""
        super().__init__("InvalidParams", message, details)


class ResourceNotFoundError(MCPError):
    """A referenced document or template does not exist."""

    def __init__(self, message: str, details: object | None = None) -> None:
        """Create a not-found error for the referenced resource."""
        super().__init__("NotFound", message, details)


_ERROR_CLASSES: dict[str, type[MCPError]] = {
    "InvalidParams": InvalidParamsError,
    "NotFound": ResourceNotFoundError,
}


def raise_mcp_error(
    error_type: str, message: str, details: object | None = None
) -> NoReturn:
    """Raise an :class:`MCPError` (or its typed subclass) with a structured payload."""
    error_class = _ERROR_CLASSES.get(error_type)
    if error_class is not None:
        raise error_class(message, details)
    raise MCPError(error_type=error_type, message=message, details=details)
