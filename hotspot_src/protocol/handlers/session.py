"""Session Handshake Handlers.

initialize and ping: the two requests an MCP client sends before (and
between) catalog calls.
"""

from typing import Any, Optional

from hotspot_src.config import PROTOCOL_VERSION, VERSION
from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.models.contracts import RequestId
from hotspot_src.protocol.responses import success_response


def handle_initialize(
    registry: WidgetRegistry, request_id: Optional[RequestId], params: dict[str, Any]
) -> dict[str, Any]:
    """Answer the initialize handshake with server info and capabilities.

    The server always answers with its own protocol version; clients that
    cannot speak it disconnect.
    """
    return success_response(
        request_id,
        {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {
                "resources": {},
                "tools": {},
            },
            "serverInfo": {
                "name": registry.server_name,
                "version": VERSION,
            },
        },
    )


def handle_ping(
    registry: WidgetRegistry, request_id: Optional[RequestId], params: dict[str, Any]
) -> dict[str, Any]:
    return success_response(request_id, {})
