"""Custom exception classes for the JSON-RPC dispatch engine."""
from typing import Any, Optional


class RPCDispatchError(Exception):
    """Base exception for dispatch engine errors."""

    pass


class ConfigurationError(RPCDispatchError):
    """Invalid server configuration."""

    pass


class DuplicateMethodError(ConfigurationError):
    """A method name is registered twice under the reject policy."""

    def __init__(self, method_name: str):
        super().__init__(f"Method already registered: {method_name}")
        self.method_name = method_name


class SerializationError(RPCDispatchError):
    """A value could not be rendered as JSON."""

    pass


class JSONRPCApplicationError(RPCDispatchError):
    """Raised by bound API methods to answer with an application error.

    The code, message and data are forwarded verbatim into the error
    response of the current request.
    """

    def __init__(self, code: int, message: str, data: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data
