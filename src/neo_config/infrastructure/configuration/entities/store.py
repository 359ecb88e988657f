"""In-memory configuration store.

The store is the single piece of mutable, process-wide configuration state.
It keeps names in insertion order, distinguishes a name holding ``None``
(tombstone-in-place) from an absent name, and notifies listeners after every
actual mutation.
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from ....core.exceptions import StoreError


logger = logging.getLogger(__name__)

StoreListener = Callable[["StoreEvent", str, Any, Any], None]


class StoreEvent(Enum):
    """Kinds of store mutations reported to listeners."""
    ADDED = "added"
    CHANGED = "changed"
    CLEARED = "cleared"


class ConfigStore:
    """Thread-safe ordered mapping of property name to value."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._lock = threading.RLock()
        self._values: Dict[str, Any] = {}
        self._listeners: List[StoreListener] = []

        if initial:
            for name, value in initial.items():
                self.add(name, value)

    # Reads

    def contains_key(self, name: str) -> bool:
        """Check whether a name is configured (a ``None`` value still counts)."""
        with self._lock:
            return name in self._values

    def get(self, name: str, default: Any = None) -> Any:
        """Get the value stored under a name, or ``default`` when absent."""
        with self._lock:
            return self._values.get(name, default)

    def keys(self) -> List[str]:
        """Snapshot of the currently held names, in insertion order."""
        with self._lock:
            return list(self._values)

    def snapshot(self) -> Dict[str, Any]:
        """Shallow copy of the whole store."""
        with self._lock:
            return dict(self._values)

    # Mutations

    def add(self, name: str, value: Any) -> None:
        """Insert a name that is not yet present."""
        if not isinstance(name, str) or not name:
            raise StoreError(f"Property name must be a non-empty string, got {name!r}")

        with self._lock:
            if name in self._values:
                raise StoreError(f"Property already present: {name}")
            self._values[name] = value

        self._notify(StoreEvent.ADDED, name, None, value)

    def set(self, name: str, value: Any) -> None:
        """Overwrite the value of a name, inserting it if absent."""
        if not isinstance(name, str) or not name:
            raise StoreError(f"Property name must be a non-empty string, got {name!r}")

        with self._lock:
            existed = name in self._values
            old_value = self._values.get(name)
            self._values[name] = value

        self._notify(StoreEvent.CHANGED if existed else StoreEvent.ADDED, name, old_value, value)

    def clear(self, name: str) -> None:
        """Remove a name; removing an absent name is a no-op."""
        with self._lock:
            if name not in self._values:
                return
            old_value = self._values.pop(name)

        self._notify(StoreEvent.CLEARED, name, old_value, None)

    # Listeners

    def add_listener(self, listener: StoreListener) -> None:
        """Register a callback invoked after each mutation."""
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: StoreListener) -> bool:
        """Unregister a callback; returns False if it was not registered."""
        with self._lock:
            try:
                self._listeners.remove(listener)
                return True
            except ValueError:
                return False

    def _notify(self, event: StoreEvent, name: str, old_value: Any, new_value: Any) -> None:
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(event, name, old_value, new_value)
            except Exception as e:
                logger.error(f"Error notifying store listener for {name}: {e}")

    # Mapping-style helpers

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains_key(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigStore({len(self)} properties)"
