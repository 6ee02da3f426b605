"""Binding of Python APIs to JSON-RPC request handlers."""
from .adapter import bind_api, create_request_json_handler, jsonrpc_method
from .disposable import DisposableFunctionRepository

__all__ = [
    "bind_api",
    "create_request_json_handler",
    "jsonrpc_method",
    "DisposableFunctionRepository",
]
