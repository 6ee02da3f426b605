"""Server-side JSON-RPC 2.0 dispatch engine."""
from .jsonrpc.dispatcher import JSONRPCServer
from .binding import jsonrpc_method

__version__ = "1.0.0"

__all__ = ["JSONRPCServer", "jsonrpc_method"]
