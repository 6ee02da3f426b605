"""JSON-RPC 2.0 request dispatcher."""
import asyncio
import logging
from concurrent.futures import Executor
from typing import TYPE_CHECKING, Any, List, Optional

from .error_factory import (
    create_error_json_from_request_json,
    create_maybe_error_json_from_request_json,
)
from .models import JSONRPC_VERSION, JSONRPCErrors, JSONRPCMethod
from .repository import DuplicatePolicy, RequestJsonHandlerRepository
from .serializer import JsonSerializer, PydanticJsonSerializer
from ..binding.adapter import bind_api
from ..binding.disposable import DisposableFunctionRepository

if TYPE_CHECKING:
    from ..config import ServerConfig

logger = logging.getLogger(__name__)


class JSONRPCServer:
    """Validates incoming JSON-RPC messages and routes them to registered handlers."""

    def __init__(
        self,
        json_serializer: Optional[JsonSerializer] = None,
        executor: Optional[Executor] = None,
        duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE,
        expose_internal_errors: bool = False,
    ):
        """Create a server.

        Args:
            json_serializer: JSON capability; pydantic-backed if not given
            executor: Worker pool for synchronous API methods
            duplicate_policy: Behavior when a method name is registered twice
            expose_internal_errors: Include exception details in internal errors
        """
        self.json_serializer = json_serializer or PydanticJsonSerializer()
        self.executor = executor
        self.expose_internal_errors = expose_internal_errors
        self.request_json_handler_repository = RequestJsonHandlerRepository(duplicate_policy)
        self.disposable_function_repository = DisposableFunctionRepository()

    @classmethod
    def from_config(
        cls, config: "ServerConfig", executor: Optional[Executor] = None
    ) -> "JSONRPCServer":
        return cls(
            executor=executor,
            duplicate_policy=config.duplicate_policy,
            expose_internal_errors=config.expose_internal_errors,
        )

    def bind_api(self, api: Any, prefix: str = "") -> List[str]:
        """Register every ``@jsonrpc_method`` member of ``api``."""
        return bind_api(
            self.request_json_handler_repository,
            api,
            self.json_serializer,
            executor=self.executor,
            prefix=prefix,
        )

    async def receive(self, json: str) -> Optional[str]:
        """Process one JSON-RPC message.

        Args:
            json: Raw request text

        Returns:
            Response text, or None when no response should be sent
        """
        method = self.json_serializer.deserialize(json, JSONRPCMethod)
        if method is None:
            return create_error_json_from_request_json(
                self.json_serializer, json, JSONRPCErrors.parse_error
            )

        if method.jsonrpc != JSONRPC_VERSION:
            return create_error_json_from_request_json(
                self.json_serializer, json, JSONRPCErrors.invalid_request
            )

        handler = self.request_json_handler_repository.get(method.method)
        if handler is None:
            return create_maybe_error_json_from_request_json(
                self.json_serializer, json, JSONRPCErrors.method_not_found
            )

        try:
            return await handler(json)
        except Exception as e:
            logger.error(f"Internal error handling {method.method}: {e}", exc_info=True)
            error = JSONRPCErrors.internal_error
            if self.expose_internal_errors:
                error = error.model_copy(
                    update={"data": {"type": type(e).__name__, "details": str(e)}}
                )
            return create_maybe_error_json_from_request_json(self.json_serializer, json, error)

    def submit(self, json: str) -> "asyncio.Task[Optional[str]]":
        """Schedule ``receive`` on the running loop and return without waiting."""
        return asyncio.ensure_future(self.receive(json))
