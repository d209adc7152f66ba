"""Direct (single-shot) Transport.

One HTTP request carries one JSON-RPC request and gets one reply. No session
is created, so clients that cannot hold a stream open can still list and
call widgets.
"""

import json
from typing import Any

from pydantic import ValidationError

from hotspot_src.core.errors import ErrorCode
from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.protocol.dispatcher import decode_request, dispatch_request, request_id_of
from hotspot_src.protocol.responses import error_response
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)

# Requests without an id are answered with this id
DEFAULT_REQUEST_ID = 1


def status_for(reply: dict[str, Any]) -> int:
    """HTTP status for a reply: 200, 500 for internal errors, else 400."""
    error = reply.get("error")
    if not error:
        return 200
    if error["code"] == ErrorCode.INTERNAL_ERROR:
        return 500
    return 400


def handle_direct_request(registry: WidgetRegistry, body: bytes) -> tuple[int, dict[str, Any]]:
    """Decode and answer one request body.

    Args:
        registry: Widget registry.
        body: Raw HTTP request body.

    Returns:
        (HTTP status, JSON-RPC reply). Never raises for bad input: an
        unparseable body is answered with id null and a parse error.
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        logger.warning(f"Direct request: unparseable body ({e})")
        return 400, error_response(None, ErrorCode.PARSE_ERROR, f"Parse error: {e}")

    if not isinstance(payload, dict):
        logger.warning(f"Direct request: expected an object, got {type(payload).__name__}")
        return 400, error_response(None, ErrorCode.INVALID_REQUEST, "Invalid request")

    try:
        request = decode_request(payload)
    except ValidationError:
        logger.warning("Direct request: invalid JSON-RPC request")
        return 400, error_response(
            request_id_of(payload), ErrorCode.INVALID_REQUEST, "Invalid request"
        )

    if request.id is None:
        request = request.model_copy(update={"id": DEFAULT_REQUEST_ID})

    logger.info(f"Direct request: {request.method}")
    reply = dispatch_request(registry, request)
    return status_for(reply), reply
