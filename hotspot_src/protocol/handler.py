"""Per-session Protocol Handler.

One ProtocolHandler is bound to each streaming session. It owns the state a
client builds up over its connection (handshake status, client info) and
delegates every request to the shared, stateless dispatcher.
"""

import threading
from typing import Any, Optional

from pydantic import ValidationError

from hotspot_src.core.errors import ErrorCode
from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.models.contracts import ClientInfo, InitializeParams, JsonRpcRequest
from hotspot_src.protocol.dispatcher import decode_request, dispatch_request, request_id_of
from hotspot_src.protocol.responses import error_response
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)


class ProtocolHandler:
    """JSON-RPC endpoint state for a single client connection."""

    def __init__(self, registry: WidgetRegistry, session_id: str = ""):
        self._registry = registry
        self.session_id = session_id
        self.client_info: Optional[ClientInfo] = None
        self.initialized = False
        self.closed = False
        self.requests_handled = 0
        self._lock = threading.Lock()

    def handle(self, message: Any) -> Optional[dict[str, Any]]:
        """Handle one decoded message.

        Args:
            message: Decoded JSON value posted by the client.

        Returns:
            The reply to write on the stream, or None for notifications and
            client responses (which get no reply).
        """
        if self.closed:
            logger.warning(f"[{self.session_id}] Message after close dropped")
            return None

        if isinstance(message, dict) and "method" not in message and (
            "result" in message or "error" in message
        ):
            # Client answering a server request; this server never sends any
            return None

        try:
            request = decode_request(message)
        except ValidationError:
            logger.warning(f"[{self.session_id}] Invalid request received")
            return error_response(
                request_id_of(message), ErrorCode.INVALID_REQUEST, "Invalid request"
            )

        if request.is_notification:
            self._handle_notification(request)
            return None

        if request.method == "initialize":
            self._record_client(request)

        reply = dispatch_request(self._registry, request)
        with self._lock:
            self.requests_handled += 1
        return reply

    def _record_client(self, request: JsonRpcRequest) -> None:
        try:
            params = InitializeParams.model_validate(request.params)
        except ValidationError:
            params = InitializeParams()
        self.client_info = params.client_info
        logger.info(
            f"[{self.session_id}] Client {params.client_info.name} "
            f"{params.client_info.version} connected"
        )

    def _handle_notification(self, request: JsonRpcRequest) -> None:
        if request.method == "notifications/initialized":
            self.initialized = True
        else:
            logger.debug(f"[{self.session_id}] Notification ignored: {request.method}")

    def close(self) -> None:
        """Release the handler. Further messages are dropped."""
        self.closed = True
        logger.debug(
            f"[{self.session_id}] Handler released after {self.requests_handled} requests"
        )
