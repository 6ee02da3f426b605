"""JSON-RPC 2.0 request/response models."""
from typing import Any, Dict, List, Optional, Union, Literal

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr, model_serializer

JSONRPC_VERSION = "2.0"

RequestId = Union[StrictInt, StrictFloat, StrictStr]


class JSONRPCMethod(BaseModel):
    """Minimal envelope: just enough to validate the version and route."""

    jsonrpc: Any = None
    method: str


class JSONRPCId(BaseModel):
    """Envelope used to recover the id of an otherwise unusable request.

    The id is left untyped so that a malformed id still marks the message
    as a request rather than a notification.
    """

    id: Any = None


class JSONRPCRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    jsonrpc: Literal["2.0"] = "2.0"
    method: str
    params: Optional[Union[List[Any], Dict[str, Any]]] = None
    id: Optional[RequestId] = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class JSONRPCError(BaseModel):
    """JSON-RPC 2.0 error model."""

    code: int
    message: str
    data: Optional[Any] = None

    @model_serializer(mode="wrap")
    def _omit_missing_data(self, handler):
        serialized = handler(self)
        if self.data is None:
            serialized.pop("data", None)
        return serialized


class JSONRPCResultResponse(BaseModel):
    """JSON-RPC 2.0 success response model."""

    jsonrpc: Literal["2.0"] = "2.0"
    result: Any = None
    id: Optional[RequestId]


class JSONRPCErrorResponse(BaseModel):
    """JSON-RPC 2.0 error response model."""

    jsonrpc: Literal["2.0"] = "2.0"
    error: JSONRPCError
    id: Optional[RequestId] = None


class ErrorCode:
    """JSON-RPC 2.0 standard error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class JSONRPCErrors:
    """Predefined error objects for the reserved protocol codes."""

    parse_error = JSONRPCError(code=ErrorCode.PARSE_ERROR, message="Parse error")
    invalid_request = JSONRPCError(code=ErrorCode.INVALID_REQUEST, message="Invalid Request")
    method_not_found = JSONRPCError(code=ErrorCode.METHOD_NOT_FOUND, message="Method not found")
    invalid_params = JSONRPCError(code=ErrorCode.INVALID_PARAMS, message="Invalid params")
    internal_error = JSONRPCError(code=ErrorCode.INTERNAL_ERROR, message="Internal error")
