"""Adapters turning plain Python callables into JSON-RPC request handlers.

A bound function receives typed arguments and returns a plain value; the
adapter built around it takes the raw request JSON and produces the raw
response JSON (or None for notifications), which is the shape the method
registry stores.
"""
import asyncio
import functools
import inspect
import logging
from concurrent.futures import Executor
from typing import Any, Callable, Dict, List, Optional, Tuple, get_type_hints

from pydantic import TypeAdapter, ValidationError

from ..jsonrpc.error_factory import build_error_response, create_error_json_from_request_json
from ..jsonrpc.models import JSONRPCError, JSONRPCErrors, JSONRPCRequest, JSONRPCResultResponse
from ..jsonrpc.repository import RequestJsonHandler, RequestJsonHandlerRepository
from ..jsonrpc.serializer import JsonSerializer
from ..utils.errors import JSONRPCApplicationError, SerializationError

logger = logging.getLogger(__name__)

METHOD_NAME_ATTRIBUTE = "__jsonrpc_method_name__"


class InvalidParamsError(Exception):
    """Params could not be bound to the target signature."""

    def __init__(self, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.data = data


def jsonrpc_method(name: Optional[str] = None):
    """Mark a function or method as exposed over JSON-RPC.

    Args:
        name: Method name on the wire; defaults to the function name
    """

    def decorator(func):
        setattr(func, METHOD_NAME_ATTRIBUTE, name or func.__name__)
        return func

    return decorator


class MethodAdapter:
    """Binds request params to a callable and renders its result."""

    def __init__(
        self,
        func: Callable[..., Any],
        serializer: JsonSerializer,
        executor: Optional[Executor] = None,
    ):
        self.func = func
        self.serializer = serializer
        self.executor = executor
        self.signature = inspect.signature(func)
        self._is_coroutine = inspect.iscoroutinefunction(func)
        self._adapters = self._build_type_adapters()

    def _build_type_adapters(self) -> Dict[str, TypeAdapter]:
        target = self.func.__func__ if inspect.ismethod(self.func) else self.func
        hints = get_type_hints(target)
        adapters = {}
        for name, parameter in self.signature.parameters.items():
            if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
                continue
            if name in hints:
                adapters[name] = TypeAdapter(hints[name])
        return adapters

    def bind_params(self, params: Optional[Any]) -> Tuple[List[Any], Dict[str, Any]]:
        """Validate params against the signature.

        Raises:
            InvalidParamsError: If params do not fit the signature
        """
        try:
            if params is None:
                bound = self.signature.bind()
            elif isinstance(params, list):
                bound = self.signature.bind(*params)
            else:
                bound = self.signature.bind(**params)
        except TypeError as e:
            raise InvalidParamsError(str(e)) from e

        for name, value in bound.arguments.items():
            adapter = self._adapters.get(name)
            if adapter is None:
                continue
            try:
                bound.arguments[name] = adapter.validate_python(value)
            except ValidationError as e:
                raise InvalidParamsError(
                    f"Invalid value for parameter '{name}'",
                    data=e.errors(include_url=False, include_context=False),
                ) from e

        bound.apply_defaults()
        return list(bound.args), dict(bound.kwargs)

    async def call(self, args: List[Any], kwargs: Dict[str, Any]) -> Any:
        if self._is_coroutine:
            return await self.func(*args, **kwargs)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self.executor, functools.partial(self.func, *args, **kwargs)
        )

    async def __call__(self, json: str) -> Optional[str]:
        request = self.serializer.deserialize(json, JSONRPCRequest)
        if request is None:
            return create_error_json_from_request_json(
                self.serializer, json, JSONRPCErrors.invalid_request
            )

        try:
            args, kwargs = self.bind_params(request.params)
            result = await self.call(args, kwargs)
        except InvalidParamsError as e:
            logger.warning(f"Invalid params for {request.method}: {e}")
            return self._error(request, JSONRPCErrors.invalid_params.model_copy(update={"data": e.data}))
        except JSONRPCApplicationError as e:
            return self._error(request, JSONRPCError(code=e.code, message=e.message, data=e.data))

        if request.is_notification:
            return None
        json_response = self.serializer.serialize(JSONRPCResultResponse(id=request.id, result=result))
        if json_response is None:
            raise SerializationError(f"Result of {request.method} is not JSON serializable")
        return json_response

    def _error(self, request: JSONRPCRequest, error: JSONRPCError) -> Optional[str]:
        if request.is_notification:
            return None
        return build_error_response(self.serializer, request.id, error)


def create_request_json_handler(
    func: Callable[..., Any],
    serializer: JsonSerializer,
    executor: Optional[Executor] = None,
) -> RequestJsonHandler:
    """Wrap ``func`` into a handler of shape ``(requestJson) -> Optional[responseJson]``."""
    return MethodAdapter(func, serializer, executor)


def get_jsonrpc_methods(api: Any) -> List[Tuple[str, Callable[..., Any]]]:
    """Collect ``(method_name, callable)`` pairs marked with ``@jsonrpc_method``."""
    methods = []
    for attribute in dir(api):
        if attribute.startswith("__"):
            continue
        member = getattr(api, attribute)
        name = getattr(member, METHOD_NAME_ATTRIBUTE, None)
        if name is not None and callable(member):
            methods.append((name, member))
    return methods


def bind_api(
    repository: RequestJsonHandlerRepository,
    api: Any,
    serializer: JsonSerializer,
    executor: Optional[Executor] = None,
    prefix: str = "",
) -> List[str]:
    """Register every exposed method of ``api`` in ``repository``.

    Args:
        repository: Registry receiving one handler per method
        api: Object (or module) whose members are marked with ``@jsonrpc_method``
        serializer: Serializer used by the generated handlers
        executor: Worker pool for synchronous methods (default loop executor if None)
        prefix: Namespace prepended to every method name

    Returns:
        The method names that were registered
    """
    bound = []
    for name, member in get_jsonrpc_methods(api):
        method_name = f"{prefix}{name}"
        repository.add(method_name, create_request_json_handler(member, serializer, executor))
        bound.append(method_name)
    logger.info(f"Bound {len(bound)} method(s) from {type(api).__name__}")
    return bound
