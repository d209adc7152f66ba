"""Handler Registry.

This module exports all JSON-RPC method handlers and the handler registry
used by the dispatcher for method routing.

Handler Convention:
    - Handlers are named `handle_{operation}`
    - Handlers take (registry, request_id, params) and return a reply dict
      built with protocol.responses.success_response
    - Failures are raised as WidgetServerError subclasses and converted to
      error replies by the dispatcher

Handler Domains:
    - session: initialize handshake and ping
    - resources: widget markup catalog
    - tools: widget tool listing and invocation
"""

from typing import Any, Callable, Optional

from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.models.contracts import RequestId
from hotspot_src.protocol.handlers.resources import (
    handle_list_resource_templates,
    handle_list_resources,
    handle_read_resource,
)
from hotspot_src.protocol.handlers.session import handle_initialize, handle_ping
from hotspot_src.protocol.handlers.tools import handle_call_tool, handle_list_tools

# Type alias for handler functions
HandlerFunc = Callable[[WidgetRegistry, Optional[RequestId], dict[str, Any]], dict[str, Any]]

# Handler registry mapping JSON-RPC method names to handler functions
HANDLER_REGISTRY: dict[str, HandlerFunc] = {
    # Session
    "initialize": handle_initialize,
    "ping": handle_ping,
    # Resources
    "resources/list": handle_list_resources,
    "resources/read": handle_read_resource,
    "resources/templates/list": handle_list_resource_templates,
    # Tools
    "tools/list": handle_list_tools,
    "tools/call": handle_call_tool,
}

__all__ = [
    # Registry
    "HANDLER_REGISTRY",
    "HandlerFunc",
    # Session
    "handle_initialize",
    "handle_ping",
    # Resources
    "handle_list_resources",
    "handle_read_resource",
    "handle_list_resource_templates",
    # Tools
    "handle_list_tools",
    "handle_call_tool",
]
