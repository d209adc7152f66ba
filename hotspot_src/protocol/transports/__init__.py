"""Transport Layer.

This package provides the two transports of the widget server:
- stream: persistent SSE sessions (one ProtocolHandler per client)
- direct: stateless single-shot JSON-RPC over HTTP

http_bridge mounts both on one FastAPI app; both reach the same dispatcher.
"""

from hotspot_src.protocol.transports.direct import handle_direct_request
from hotspot_src.protocol.transports.http_bridge import create_app, run_server
from hotspot_src.protocol.transports.stream import QueueSink, event_stream

__all__ = [
    "create_app",
    "run_server",
    "handle_direct_request",
    "event_stream",
    "QueueSink",
]
