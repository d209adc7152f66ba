"""Tool Handlers.

Lists the widget tools and runs tools/call: lookup by id, argument
validation, then the response builder. Validation failures short-circuit
before any dataset is read.
"""

from typing import Any, Optional

from hotspot_src.core.errors import UnknownTool
from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.core.response_builder import build_response
from hotspot_src.core.validation import validate_arguments
from hotspot_src.models.contracts import CallToolParams, RequestId
from hotspot_src.protocol.handlers.params import parse_params
from hotspot_src.protocol.responses import success_response
from hotspot_src.widget_utils.logging_config import get_logger

logger = get_logger(__name__)


def handle_list_tools(
    registry: WidgetRegistry, request_id: Optional[RequestId], params: dict[str, Any]
) -> dict[str, Any]:
    return success_response(request_id, {"tools": registry.tools()})


def handle_call_tool(
    registry: WidgetRegistry, request_id: Optional[RequestId], params: dict[str, Any]
) -> dict[str, Any]:
    """Invoke a widget tool.

    Args:
        registry: Widget registry.
        request_id: JSON-RPC request id.
        params: Must contain 'name'; 'arguments' is optional.

    Returns:
        Success response with content, structuredContent and _meta.

    Raises:
        UnknownTool: If no widget has that id.
        InvalidArguments: If the arguments violate the widget's schema.
        DatasetError: If the widget's dataset cannot be loaded.
    """
    call = parse_params(CallToolParams, "tools/call", params)
    widget = registry.by_id(call.name)
    if widget is None:
        raise UnknownTool(f"Unknown tool: {call.name}")

    args = validate_arguments(widget, call.arguments)
    logger.info(f"tools/call {widget.id} ({', '.join(args) or 'no arguments'})")

    return success_response(request_id, build_response(widget, args))
