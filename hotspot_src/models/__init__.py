"""
Pydantic models for the widget catalog and the JSON-RPC wire format.

Usage:
    from hotspot_src.models import WidgetSpec, InputSchema, FieldSpec
"""

from .contracts import (
    CallToolParams,
    ClientInfo,
    ErrorDetail,
    InitializeParams,
    JsonRpcRequest,
    ReadResourceParams,
    RequestId,
)
from .widgets import FieldSpec, InputSchema, WidgetDescriptor, WidgetSpec

__all__ = [
    # Catalog models
    "FieldSpec",
    "InputSchema",
    "WidgetSpec",
    "WidgetDescriptor",
    # Wire contracts
    "JsonRpcRequest",
    "RequestId",
    "ReadResourceParams",
    "CallToolParams",
    "InitializeParams",
    "ClientInfo",
    "ErrorDetail",
]
