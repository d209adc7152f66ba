"""Resource Handlers.

Serves the widget markup catalog: listing, reading by template URI, and the
resource-template view used by clients that resolve ui:// templates.
"""

from typing import Any, Optional

from hotspot_src.core.errors import UnknownResource
from hotspot_src.core.registry import WidgetRegistry
from hotspot_src.models.contracts import ReadResourceParams, RequestId
from hotspot_src.protocol.handlers.params import parse_params
from hotspot_src.protocol.responses import success_response


def handle_list_resources(
    registry: WidgetRegistry, request_id: Optional[RequestId], params: dict[str, Any]
) -> dict[str, Any]:
    return success_response(request_id, {"resources": registry.resources()})


def handle_read_resource(
    registry: WidgetRegistry, request_id: Optional[RequestId], params: dict[str, Any]
) -> dict[str, Any]:
    """Return a widget's markup.

    Args:
        registry: Widget registry.
        request_id: JSON-RPC request id.
        params: Must contain 'uri' (a widget template URI).

    Returns:
        Success response with a single contents entry.

    Raises:
        UnknownResource: If no widget has that template URI.
    """
    uri = parse_params(ReadResourceParams, "resources/read", params).uri
    widget = registry.by_uri(uri)
    if widget is None:
        raise UnknownResource(f"Unknown resource: {uri}")

    return success_response(request_id, {"contents": [widget.to_resource_contents()]})


def handle_list_resource_templates(
    registry: WidgetRegistry, request_id: Optional[RequestId], params: dict[str, Any]
) -> dict[str, Any]:
    return success_response(
        request_id, {"resourceTemplates": registry.resource_templates()}
    )
