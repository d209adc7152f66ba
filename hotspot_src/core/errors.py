# core/errors.py
"""
Error taxonomy for the widget server.

Every per-request failure is a WidgetServerError carrying the JSON-RPC code
it maps to, so transports can convert it without inspecting the concrete
type. Only registry build failures (AssetNotFound, RegistryError)
are fatal to the process.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class WidgetServerError(Exception):
    """Base class for all widget server errors."""

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# === Startup-fatal ===


class AssetNotFound(WidgetServerError):
    """Raised when a widget's HTML markup cannot be resolved at startup."""


class RegistryError(WidgetServerError):
    """Raised when the widget catalog is inconsistent (duplicate id or URI)."""


# === Per-request ===


class UnknownSession(WidgetServerError):
    """Raised when a message targets a session id that is not open."""


class UnknownResource(WidgetServerError):
    code = ErrorCode.METHOD_NOT_FOUND


class UnknownTool(WidgetServerError):
    code = ErrorCode.METHOD_NOT_FOUND


class InvalidArguments(WidgetServerError):
    """Raised when tool arguments violate the widget's input schema."""

    code = ErrorCode.INVALID_PARAMS


class DatasetError(WidgetServerError):
    """Raised when a widget's canned dataset is unreadable or malformed."""


# === Connection-level ===


class TransportError(WidgetServerError):
    """Raised when a session stream can no longer accept messages.

    Never leaves the transport adapter: it is logged and the session is
    torn down.
    """
