"""JSON-RPC 2.0 protocol models, registry and error responses."""
from .models import JSONRPCRequest, JSONRPCResultResponse, JSONRPCErrorResponse, JSONRPCError, ErrorCode, JSONRPCErrors
from .repository import DuplicatePolicy, RequestJsonHandlerRepository
from .serializer import JsonSerializer, PydanticJsonSerializer
from .error_factory import build_error_response

__all__ = [
    "JSONRPCRequest",
    "JSONRPCResultResponse",
    "JSONRPCErrorResponse",
    "JSONRPCError",
    "ErrorCode",
    "JSONRPCErrors",
    "DuplicatePolicy",
    "RequestJsonHandlerRepository",
    "JsonSerializer",
    "PydanticJsonSerializer",
    "build_error_response",
]
