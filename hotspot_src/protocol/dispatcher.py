"""Request Dispatcher.

Routes decoded JSON-RPC requests to handler functions. This is the error
boundary for a single request: every failure is converted into a JSON-RPC
error reply here, so nothing a client sends can take the process down.
"""

from typing import Any, Optional

from hotspot_src.core.errors import ErrorCode, WidgetServerError
from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.models.contracts import JsonRpcRequest, RequestId
from hotspot_src.protocol.handlers import HANDLER_REGISTRY
from hotspot_src.protocol.responses import error_response
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)


def request_id_of(message: Any) -> Optional[RequestId]:
    """Best-effort id of an undecodable message, for the error reply."""
    if isinstance(message, dict):
        raw = message.get("id")
        if isinstance(raw, (int, str)) and not isinstance(raw, bool):
            return raw
    return None


def decode_request(message: Any) -> JsonRpcRequest:
    """Validate a decoded JSON value as a JSON-RPC request.

    Raises:
        ValidationError: If the value is not a request object.
    """
    return JsonRpcRequest.model_validate(message)


def dispatch_request(registry: WidgetRegistry, request: JsonRpcRequest) -> dict[str, Any]:
    """Run a validated request against its handler.

    Args:
        registry: Widget registry the handlers read from.
        request: Validated request.

    Returns:
        Reply dict matching the JSON-RPC contract:
        - Success: {"jsonrpc": "2.0", "id": id, "result": {...}}
        - Error: {"jsonrpc": "2.0", "id": id, "error": {"code": ..., "message": "..."}}
    """
    handler = HANDLER_REGISTRY.get(request.method)

    if handler is None:
        logger.warning(f"Unknown method received: {request.method}")
        return error_response(
            request.id,
            ErrorCode.METHOD_NOT_FOUND,
            f"Method not found: {request.method}",
        )

    try:
        return handler(registry, request.id, request.params)
    except WidgetServerError as e:
        if e.code == ErrorCode.INTERNAL_ERROR:
            logger.error(f"{request.method} failed: {e.message}")
        else:
            logger.warning(f"{request.method} rejected: {e.message}")
        return error_response(request.id, e.code, e.message)
    except Exception as e:
        logger.error(f"Handler error for '{request.method}': {e}", exc_info=True)
        return error_response(request.id, ErrorCode.INTERNAL_ERROR, str(e) or "Internal error")
