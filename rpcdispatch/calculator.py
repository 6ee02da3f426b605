"""Demo API exposed by the bundled HTTP server."""
import logging
from typing import Any, List, Union

from .binding import jsonrpc_method
from .utils.errors import JSONRPCApplicationError

logger = logging.getLogger(__name__)

DIVISION_BY_ZERO = 1001

Number = Union[int, float]


class CalculatorAPI:
    def __init__(self):
        self.messages: List[str] = []

    @jsonrpc_method()
    async def add(self, a: Number, b: Number) -> Number:
        """Add two numbers."""
        return a + b

    @jsonrpc_method()
    async def subtract(self, minuend: Number, subtrahend: Number) -> Number:
        return minuend - subtrahend

    @jsonrpc_method()
    def divide(self, dividend: Number, divisor: Number) -> Number:
        """Divide two numbers; runs on the worker pool."""
        if divisor == 0:
            raise JSONRPCApplicationError(
                DIVISION_BY_ZERO, "Division by zero", data={"dividend": dividend}
            )
        return dividend / divisor

    @jsonrpc_method()
    async def log(self, message: str) -> None:
        """Record a message. Usually sent as a notification."""
        logger.info(f"Client log: {message}")
        self.messages.append(message)

    @jsonrpc_method()
    async def echo(self, value: Any) -> Any:
        return value
