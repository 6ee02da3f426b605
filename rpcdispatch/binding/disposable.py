"""Registry of callback handles that remote peers may invoke until disposed."""
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


class DisposableFunctionRepository:
    """Keyed store of functions passed across the wire.

    Each function gets a fresh key when added; the key stays valid until
    ``dispose`` is called for it. Keys are never reused.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._functions: Dict[str, Callable[..., Any]] = {}

    def add(self, function: Callable[..., Any]) -> str:
        key = str(uuid.uuid4())
        with self._lock:
            self._functions[key] = function
        logger.debug(f"Added disposable function: {key}")
        return key

    def get(self, key: str) -> Optional[Callable[..., Any]]:
        return self._functions.get(key)

    def dispose(self, key: str) -> bool:
        """Drop a function. Returns False if the key was unknown or already disposed."""
        with self._lock:
            function = self._functions.pop(key, None)
        if function is None:
            return False
        logger.debug(f"Disposed function: {key}")
        return True

    def __len__(self) -> int:
        return len(self._functions)
