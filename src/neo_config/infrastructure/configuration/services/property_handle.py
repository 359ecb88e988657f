"""Live, typed read handles over the configuration store."""

import threading
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

from ..adapters.decoder import get_default_decoder
from ..entities.protocols import ConfigurationStore, Decoder


T = TypeVar("T")


class PropertyHandle(Generic[T]):
    """Named, typed accessor that re-reads the store on every call.

    No value is cached: ``get()`` always reflects the latest reconciled state.
    A missing property, or one holding ``None``, yields the default.
    """

    def __init__(
        self,
        store: ConfigurationStore,
        name: str,
        property_type: Any = Any,
        default: Optional[T] = None,
        decoder: Optional[Decoder] = None,
    ):
        self._store = store
        self._name = name
        self._property_type = property_type
        self._default = default
        self._decoder = decoder or get_default_decoder()

    @property
    def name(self) -> str:
        return self._name

    @property
    def property_type(self) -> Any:
        return self._property_type

    @property
    def default(self) -> Optional[T]:
        return self._default

    def get(self) -> Optional[T]:
        """Current value decoded to the declared type, or the default."""
        raw_value = self._store.get(self._name)
        if raw_value is None:
            return self._default
        return self._decoder.decode(self._property_type, raw_value)

    def is_configured(self) -> bool:
        """Whether the property name is present in the store."""
        return self._store.contains_key(self._name)

    def __repr__(self) -> str:
        type_name = getattr(self._property_type, "__name__", repr(self._property_type))
        return f"PropertyHandle({self._name!r}, type={type_name}, default={self._default!r})"


class PropertyFactory:
    """Creates property handles bound to one store.

    Handles are cached per distinct (name, type, default); unhashable
    defaults get a fresh handle each time.
    """

    def __init__(self, store: ConfigurationStore, decoder: Optional[Decoder] = None):
        self._store = store
        self._decoder = decoder or get_default_decoder()
        self._lock = threading.Lock()
        self._handles: Dict[Tuple[str, Any, type, Any], PropertyHandle] = {}

    @property
    def store(self) -> ConfigurationStore:
        return self._store

    @property
    def decoder(self) -> Decoder:
        return self._decoder

    def get_property(self, name: str, property_type: Any = Any, default: Any = None) -> PropertyHandle:
        """Get the handle for ``name`` decoded as ``property_type``."""
        cache_key = (name, property_type, type(default), default)
        try:
            hash(cache_key)
        except TypeError:
            return PropertyHandle(self._store, name, property_type, default, self._decoder)

        with self._lock:
            handle = self._handles.get(cache_key)
            if handle is None:
                handle = PropertyHandle(self._store, name, property_type, default, self._decoder)
                self._handles[cache_key] = handle
            return handle
