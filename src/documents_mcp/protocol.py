"""JSON-RPC envelope parsing and serialization.

Request identifiers are opaque: whatever the client sends is echoed back
verbatim. A request without an ``id`` member is represented with the
:data:`ABSENT` sentinel so it can be told apart from an explicit ``null``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Final

JSONRPC_VERSION: Final = "2.0"


class _Absent:
    """Marker type for an ``id`` member that was not sent."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


@dataclass(frozen=True)
class JsonRpcRequest:
    """Structured view of an inbound JSON-RPC envelope.

    Attributes:
        method: Method name, or ``None`` when absent or not a string.
        params: Raw ``params`` member, ``None`` when absent.
        id: Request identifier or :data:`ABSENT`.
        valid: ``False`` when the envelope is well-formed JSON but not a
            usable request (not an object, or no string ``method``).

    """

    method: str | None
    params: Any = None
    id: Any = field(default=ABSENT)
    valid: bool = True


@dataclass(frozen=True)
class ParseFailure:
    """Raw input that could not be decoded as JSON."""

    reason: str


def parse_request(raw: str | bytes) -> JsonRpcRequest | ParseFailure:
    """Decode raw request text into a :class:`JsonRpcRequest`.

    Only undecodable input yields :class:`ParseFailure`; structurally wrong
    envelopes come back as requests flagged ``valid=False``.
    """
    try:
        document = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as exc:
        # RecursionError: nesting deeper than the decoder can follow.
        return ParseFailure(reason=str(exc))

    if not isinstance(document, dict):
        return JsonRpcRequest(method=None, valid=False)

    method = document.get("method")
    request_id = document.get("id", ABSENT)
    if not isinstance(method, str):
        return JsonRpcRequest(method=None, id=request_id, valid=False)
    return JsonRpcRequest(method=method, params=document.get("params"), id=request_id)


def encode_success(request_id: Any, result: Any) -> str:
    """Serialize a success envelope, omitting ``id`` only when it was absent."""
    response: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION}
    if request_id is not ABSENT:
        response["id"] = request_id
    response["result"] = result
    return json.dumps(response)


def encode_error(request_id: Any, code: int, message: str) -> str:
    """Serialize an error envelope; an absent ``id`` is written as ``null``."""
    response = {
        "jsonrpc": JSONRPC_VERSION,
        "id": None if request_id is ABSENT else request_id,
        "error": {"code": int(code), "message": message},
    }
    return json.dumps(response)
