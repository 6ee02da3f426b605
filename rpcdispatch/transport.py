"""HTTP transport feeding request bodies into a JSONRPCServer."""
import logging

from fastapi import Request, Response

from .jsonrpc.dispatcher import JSONRPCServer
from .jsonrpc.error_factory import build_error_response
from .jsonrpc.models import JSONRPCErrors

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


class HTTPTransport:
    """Maps one HTTP POST to one JSON-RPC message."""

    def __init__(self, jsonrpc_server: JSONRPCServer):
        self.jsonrpc_server = jsonrpc_server

    async def handle_post_request(self, request: Request) -> Response:
        """Handle POST request from client.

        The body is passed to the dispatcher untouched; malformed JSON and
        bodies that are not valid UTF-8 are reported as a JSON-RPC parse
        error rather than an HTTP error.
        """
        body = await request.body()
        try:
            json = body.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Rejecting request body that is not valid UTF-8: {e}")
            response_json = build_error_response(
                self.jsonrpc_server.json_serializer, None, JSONRPCErrors.parse_error
            )
            return Response(content=response_json, media_type=JSON_MEDIA_TYPE)

        response_json = await self.jsonrpc_server.receive(json)

        # Notifications, or handlers that chose not to answer
        if response_json is None:
            return Response(status_code=202)

        return Response(content=response_json, media_type=JSON_MEDIA_TYPE)
