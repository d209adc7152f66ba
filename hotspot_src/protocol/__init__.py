"""Widget Server Protocol Core.

This package contains the request/response layer of the widget server:
- dispatcher: JSON-RPC method routing and the per-request error boundary
- handlers: Method handlers organized by domain
- handler: Per-session protocol handler state
- sessions: Session manager for streaming clients
- transports: SSE stream, single-shot HTTP, and the FastAPI app
- responses: Standard reply format helpers
- lifecycle: Process startup (logging, registry build)
"""

# Response helpers
from hotspot_src.protocol.responses import error_response, success_response

# Lifecycle management
from hotspot_src.protocol.lifecycle import build_registry, setup_process

# Dispatcher
from hotspot_src.protocol.dispatcher import decode_request, dispatch_request

# Sessions
from hotspot_src.protocol.handler import ProtocolHandler
from hotspot_src.protocol.sessions import Session, SessionManager, SessionState

__all__ = [
    # Responses
    "success_response",
    "error_response",
    # Lifecycle
    "setup_process",
    "build_registry",
    # Dispatcher
    "decode_request",
    "dispatch_request",
    # Sessions
    "ProtocolHandler",
    "Session",
    "SessionManager",
    "SessionState",
]
