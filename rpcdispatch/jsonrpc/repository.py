"""Thread-safe registry mapping method names to request handlers."""
import logging
import threading
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Optional

from ..utils.errors import DuplicateMethodError

logger = logging.getLogger(__name__)

RequestJsonHandler = Callable[[str], Awaitable[Optional[str]]]


class DuplicatePolicy(str, Enum):
    """What happens when a method name is registered a second time."""

    OVERWRITE = "overwrite"
    REJECT = "reject"


class RequestJsonHandlerRepository:
    """Registry of JSON-RPC method handlers.

    Writers serialize on a lock and publish a fresh dict; readers use the
    current snapshot without locking, so lookups never block on
    registration. Handlers cannot be removed once added.
    """

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.OVERWRITE):
        self.duplicate_policy = DuplicatePolicy(duplicate_policy)
        self._lock = threading.Lock()
        self._handlers: Dict[str, RequestJsonHandler] = {}

    def add(self, method_name: str, handler: RequestJsonHandler) -> None:
        """Register a handler under a method name.

        Args:
            method_name: Name of the JSON-RPC method (e.g., "calc.add")
            handler: Async callable taking the raw request JSON

        Raises:
            DuplicateMethodError: If the name is taken and the policy is reject
        """
        with self._lock:
            if method_name in self._handlers:
                if self.duplicate_policy is DuplicatePolicy.REJECT:
                    raise DuplicateMethodError(method_name)
                logger.warning(f"Overwriting JSON-RPC method: {method_name}")
            handlers = dict(self._handlers)
            handlers[method_name] = handler
            self._handlers = handlers
        logger.info(f"Registered JSON-RPC method: {method_name}")

    def get(self, method_name: str) -> Optional[RequestJsonHandler]:
        return self._handlers.get(method_name)

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def __contains__(self, method_name: object) -> bool:
        return method_name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
