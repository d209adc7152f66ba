"""
JSON-RPC Data Contracts

Pydantic models for the messages exchanged with MCP clients. Incoming
messages are validated into these models at the dispatcher boundary; replies
are built as plain dicts by protocol.responses.
"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

RequestId = Union[int, str]


# =============================================================================
# REQUEST MODELS (client -> server)
# =============================================================================


class JsonRpcRequest(BaseModel):
    """
    Incoming JSON-RPC request or notification.

    A message without an id is a notification and gets no reply.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: Optional[Literal["2.0"]] = None
    id: Optional[RequestId] = Field(None, description="Correlation ID, absent for notifications")
    method: str = Field(..., min_length=1, description="Method name (e.g., 'tools/call')")
    params: dict[str, Any] = Field(default_factory=dict, description="Method parameters")

    @field_validator("params", mode="before")
    @classmethod
    def _null_params(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_notification(self) -> bool:
        return self.id is None


class ReadResourceParams(BaseModel):
    uri: str


class CallToolParams(BaseModel):
    name: str
    arguments: Optional[dict[str, Any]] = None


class ClientInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = "unknown"
    version: str = "unknown"


class InitializeParams(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    protocol_version: Optional[str] = Field(None, alias="protocolVersion")
    client_info: ClientInfo = Field(default_factory=ClientInfo, alias="clientInfo")


# =============================================================================
# RESPONSE MODELS (server -> client)
# =============================================================================


class ErrorDetail(BaseModel):
    """Error object of a JSON-RPC error reply."""

    code: int = Field(..., description="JSON-RPC error code (e.g., -32601)")
    message: str = Field(..., description="Human-readable error message")
