"""One-shot binding of configuration values onto objects.

The binder copies the store's current values into the fields and setters of
an object whose class is decorated with ``@configuration``. Binding is a
copy, not a live link: the binder keeps no reference to the target.

Phases, in order:
    1. prefix resolution (``${param}`` from the target, then ``${...}`` from the store)
    2. field assignment
    3. setter invocation
    4. post-configure hook

Any failure raises MappingError naming the offending member. Assignments
made before the failure are kept.
"""

import inspect
import logging
from typing import Any, Dict, Optional

from ....core.exceptions import MappingError
from ..adapters.decoder import get_default_decoder
from ..adapters.interpolator import ConfigStrInterpolator
from ..adapters.ioc import NULL_IOC_RESOLVER
from ..entities.bindings import Binding, binding_table
from ..entities.descriptor import ConfigurationDescriptor
from ..entities.protocols import ConfigurationStore, Decoder, IoCResolver, StrInterpolator
from .prefix import resolve_prefix


logger = logging.getLogger(__name__)

_MISSING = object()


class ConfigBinder:
    """Maps store values onto configuration objects."""

    def __init__(
        self,
        decoder: Optional[Decoder] = None,
        interpolator: Optional[StrInterpolator] = None,
        allow_post_configure: bool = True,
        separator: str = ".",
    ):
        self._decoder = decoder or get_default_decoder()
        self._interpolator = interpolator or ConfigStrInterpolator()
        self._allow_post_configure = allow_post_configure
        self._separator = separator

    def map_config(
        self,
        target: Any,
        store: ConfigurationStore,
        ioc: Optional[IoCResolver] = None,
    ) -> None:
        """Bind current store values onto ``target``.

        Does nothing if the target's class is not decorated with ``@configuration``.

        Raises:
            MappingError: if a parameter, field, setter or hook cannot be processed.
        """
        target_type = type(target)
        table = binding_table(target_type)
        if table is None:
            return

        ioc = ioc or NULL_IOC_RESOLVER
        descriptor = table.descriptor
        prefix = self.resolve_prefix(target, descriptor, store)

        assigned = 0
        for binding in table.fields:
            value = self._resolve_value(target_type, binding, prefix, store, ioc)
            if value is None:
                continue
            try:
                setattr(target, binding.member, value)
            except Exception as e:
                raise MappingError(
                    target_type, binding.member, f"unable to inject field with value {value!r}: {e}"
                ) from e
            assigned += 1

        for binding in table.setters:
            value = self._resolve_value(target_type, binding, prefix, store, ioc)
            if value is None:
                continue
            try:
                getattr(target, binding.member)(value)
            except Exception as e:
                raise MappingError(
                    target_type, binding.member, f"unable to invoke setter with value {value!r}: {e}"
                ) from e
            assigned += 1

        if descriptor.post_configure and self._allow_post_configure:
            self._post_configure(target, descriptor.post_configure)

        logger.debug(f"Mapped {assigned} properties onto {target_type.__name__} with prefix '{prefix}'")

    def resolve_prefix(
        self,
        target: Any,
        descriptor: ConfigurationDescriptor,
        store: ConfigurationStore,
    ) -> str:
        """Effective key prefix for ``target`` under ``descriptor``."""
        params: Dict[str, str] = {}
        for param in descriptor.params:
            params[param] = self._read_param(target, param)

        return resolve_prefix(descriptor.prefix, store, self._interpolator, self._separator, params)

    def _read_param(self, target: Any, param: str) -> str:
        """Read a prefix parameter from an attribute or a zero-argument accessor."""
        target_type = type(target)

        try:
            value = getattr(target, param, _MISSING)
        except Exception as e:
            raise MappingError(target_type, param, f"unable to read prefix parameter: {e}") from e

        if value is _MISSING or inspect.ismethod(value):
            accessor = value if inspect.ismethod(value) else self._find_accessor(target, param)
            if accessor is None:
                raise MappingError(target_type, param, "no attribute or accessor for prefix parameter")
            try:
                value = accessor()
            except Exception as e:
                raise MappingError(target_type, param, f"prefix parameter accessor failed: {e}") from e

        if value is None:
            raise MappingError(target_type, param, "prefix parameter is None")
        return str(value)

    @staticmethod
    def _find_accessor(target: Any, param: str) -> Optional[Any]:
        for name in (f"get_{param}", f"get{param[:1].upper()}{param[1:]}"):
            accessor = getattr(target, name, None)
            if callable(accessor):
                return accessor
        return None

    def _resolve_value(
        self,
        target_type: type,
        binding: Binding,
        prefix: str,
        store: ConfigurationStore,
        ioc: IoCResolver,
    ) -> Any:
        key = prefix + binding.property_name
        raw_value = store.get(key)
        if raw_value is None:
            return None

        try:
            if binding.is_interface:
                return ioc.get_instance(str(raw_value), binding.target_type)
            return self._decoder.decode(binding.target_type, raw_value)
        except Exception as e:
            raise MappingError(target_type, binding.member, f"unable to resolve '{key}': {e}") from e

    @staticmethod
    def _post_configure(target: Any, method_name: str) -> None:
        target_type = type(target)
        hook = getattr(target, method_name, None)
        if not callable(hook):
            raise MappingError(target_type, method_name, "post-configure method not found")
        try:
            hook()
        except Exception as e:
            raise MappingError(
                target_type, method_name, f"unable to invoke post-configure method: {e}"
            ) from e
