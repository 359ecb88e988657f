"""Live read-through proxies for configuration interfaces.

A configuration interface is a Protocol or abstract class whose ``get_*``
methods describe properties::

    @configuration(prefix="db")
    class DatabaseSettings(Protocol):
        def get_pool_size(self) -> int: ...   # needs @default_value

        @default_value("30")
        def get_timeout(self) -> int: ...

        def get_url(self) -> Optional[str]: ...

``ProxyFactory.new_proxy`` builds an implementation whose accessors read the
store on every call through one PropertyHandle each.
"""

import functools
import inspect
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Optional, Type, TypeVar, get_type_hints

from ....core.exceptions import ConfigurationError
from ..adapters.interpolator import ConfigStrInterpolator
from ..entities.bindings import accessor_property_name
from ..entities.descriptor import DEFAULT_VALUE_ATTRIBUTE, get_descriptor
from ..entities.protocols import StrInterpolator
from .prefix import resolve_prefix
from .property_handle import PropertyFactory, PropertyHandle


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Return types that have no None fallback and therefore need a declared default
PRIMITIVE_TYPES = (int, float, bool, complex)


def _make_accessor(func: Callable[..., Any], handle: PropertyHandle) -> Callable[..., Any]:
    # updated=() keeps __isabstractmethod__ from being copied onto the implementation
    @functools.wraps(func, updated=())
    def accessor(self, *args, **kwargs):
        return handle.get()

    return accessor


def _make_unsupported(interface: type, name: str) -> Callable[..., Any]:
    def unsupported(self, *args, **kwargs):
        raise NotImplementedError(f"{interface.__name__}.{name} is not a configuration accessor")

    unsupported.__name__ = name
    return unsupported


class ProxyFactory:
    """Builds live proxies for configuration interfaces."""

    def __init__(self, interpolator: Optional[StrInterpolator] = None, separator: str = "."):
        self._interpolator = interpolator or ConfigStrInterpolator()
        self._separator = separator

    def new_proxy(self, interface: Type[T], property_factory: PropertyFactory) -> T:
        """Create a live implementation of ``interface``.

        Raises:
            ConfigurationError: if an accessor with a primitive return type has
                no default, or a default literal cannot be decoded (DecodeError).
        """
        if not inspect.isclass(interface):
            raise ConfigurationError(f"Proxy target must be a class, got {interface!r}")

        descriptor = get_descriptor(interface)
        prefix = resolve_prefix(
            descriptor.prefix if descriptor else "",
            property_factory.store,
            self._interpolator,
            self._separator,
        )

        handles: Dict[str, PropertyHandle] = {}
        namespace: Dict[str, Any] = {}
        for name, func in inspect.getmembers(interface, inspect.isfunction):
            property_name = accessor_property_name(name)
            if property_name is None:
                continue
            if isinstance(inspect.getattr_static(interface, name), staticmethod):
                continue

            handle = self._build_handle(interface, name, func, prefix + property_name, property_factory)
            handles[name] = handle
            namespace[name] = _make_accessor(func, handle)

        for name in getattr(interface, "__abstractmethods__", ()):
            if name not in namespace:
                namespace[name] = _make_unsupported(interface, name)

        namespace["__property_handles__"] = MappingProxyType(handles)
        namespace["__repr__"] = lambda self: f"<{interface.__name__} proxy prefix='{prefix}'>"

        proxy_type = type(f"{interface.__name__}Proxy", (interface,), namespace)
        logger.debug(f"Created proxy for {interface.__name__} with {len(handles)} properties")
        return proxy_type()

    def _build_handle(
        self,
        interface: type,
        method_name: str,
        func: Callable[..., Any],
        key: str,
        property_factory: PropertyFactory,
    ) -> PropertyHandle:
        try:
            hints = get_type_hints(func, include_extras=True)
        except Exception as e:
            raise ConfigurationError(
                f"Cannot resolve return type of {interface.__name__}.{method_name}: {e}"
            ) from e

        return_type = hints.get("return", Any)

        default = None
        if hasattr(func, DEFAULT_VALUE_ATTRIBUTE):
            literal = getattr(func, DEFAULT_VALUE_ATTRIBUTE)
            if literal is not None:
                default = property_factory.decoder.decode(return_type, literal)

        if default is None and return_type in PRIMITIVE_TYPES:
            raise ConfigurationError(
                f"Method with primitive return type must have a default value. "
                f"method={interface.__name__}.{method_name}",
                details={"interface": interface.__name__, "method": method_name},
            )

        return property_factory.get_property(key, return_type, default)
