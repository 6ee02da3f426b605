"""Builds JSON-RPC error responses correlated to the original request."""
from typing import Optional, Tuple

from .models import JSONRPCError, JSONRPCErrorResponse, JSONRPCId, RequestId
from .serializer import JsonSerializer
from ..utils.errors import SerializationError


def build_error_response(
    serializer: JsonSerializer,
    recovered_id: Optional[RequestId],
    error: JSONRPCError,
) -> str:
    """Render an error response for the given id (null when unknown)."""
    json = serializer.serialize(JSONRPCErrorResponse(id=recovered_id, error=error))
    if json is None:
        raise SerializationError(f"Could not serialize error response (code {error.code})")
    return json


def recover_id(serializer: JsonSerializer, json: str) -> Tuple[bool, Optional[RequestId]]:
    """Best-effort recovery of a request id.

    Returns:
        ``(has_id, id)``; ``has_id`` is False when the text is not a JSON
        object or has no ``id`` member, which is how notifications look. An
        id of the wrong type is reported as present but null.
    """
    envelope = serializer.deserialize(json, JSONRPCId)
    if envelope is None or "id" not in envelope.model_fields_set:
        return False, None
    request_id = envelope.id
    if isinstance(request_id, bool) or not isinstance(request_id, (int, float, str)):
        request_id = None
    return True, request_id


def create_error_json_from_request_json(
    serializer: JsonSerializer, json: str, error: JSONRPCError
) -> str:
    """Error response for ``json``, always produced."""
    _, request_id = recover_id(serializer, json)
    return build_error_response(serializer, request_id, error)


def create_maybe_error_json_from_request_json(
    serializer: JsonSerializer, json: str, error: JSONRPCError
) -> Optional[str]:
    """Error response for ``json``, or None if the request is a notification."""
    has_id, request_id = recover_id(serializer, json)
    if not has_id:
        return None
    return build_error_response(serializer, request_id, error)
