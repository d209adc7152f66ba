"""Standard JSON-RPC Response Helpers.

Provides consistent reply formatting for every protocol handler and
transport, so both transports emit identical envelopes.

Response Format:
    Success: {"jsonrpc": "2.0", "id": request_id, "result": {...}}
    Error:   {"jsonrpc": "2.0", "id": request_id, "error": {"code": -32601, "message": "..."}}
"""

from typing import Any, Optional

from hotspot_src.models.contracts import ErrorDetail, RequestId


def success_response(request_id: Optional[RequestId], result: dict[str, Any]) -> dict[str, Any]:
    """Create a JSON-RPC success reply.

    Args:
        request_id: Correlation id echoed from the request.
        result: Method result.

    Returns:
        Reply dict.

    Example:
        >>> success_response(1, {"tools": []})
        {"jsonrpc": "2.0", "id": 1, "result": {"tools": []}}
    """
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "result": result,
    }


def error_response(request_id: Optional[RequestId], code: int, message: str) -> dict[str, Any]:
    """Create a JSON-RPC error reply.

    Args:
        request_id: Correlation id echoed from the request; None when the
            request could not be decoded.
        code: JSON-RPC error code (e.g., -32601).
        message: Human-readable error message.

    Returns:
        Reply dict.

    Example:
        >>> error_response(None, -32700, "Parse error")
        {"jsonrpc": "2.0", "id": None, "error": {"code": -32700, "message": "Parse error"}}
    """
    return {
        "jsonrpc": "2.0",
        "id": request_id,
        "error": ErrorDetail(code=int(code), message=message).model_dump(),
    }
