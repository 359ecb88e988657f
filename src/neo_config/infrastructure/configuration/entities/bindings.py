"""Binding tables for configuration classes.

A binding table lists, once per bindable class, every field and setter the
binder may assign, with the property name it reads and the type it decodes
into. Tables are built by introspecting annotations and cached per class.
"""

import inspect
import threading
import weakref
from dataclasses import dataclass
from enum import Enum
from types import UnionType
from typing import Annotated, Any, ClassVar, Final, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from ....core.exceptions import MappingError
from .descriptor import ConfigurationDescriptor, get_descriptor

_UNION_ORIGINS = (Union, UnionType)

_TABLES: "weakref.WeakKeyDictionary[type, Optional[BindingTable]]" = weakref.WeakKeyDictionary()
_TABLES_LOCK = threading.Lock()


class BindingKind(Enum):
    """How a binding is applied to the target."""
    FIELD = "field"
    SETTER = "setter"


@dataclass(frozen=True)
class Binding:
    """One assignable member of a configuration class."""

    member: str
    property_name: str
    target_type: Any
    kind: BindingKind
    is_interface: bool


@dataclass(frozen=True)
class BindingTable:
    """All bindings of a configuration class, grouped by phase."""

    descriptor: ConfigurationDescriptor
    fields: Tuple[Binding, ...] = ()
    setters: Tuple[Binding, ...] = ()


def unwrap_type(tp: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers from a type hint."""
    origin = get_origin(tp)
    if origin is Annotated:
        return unwrap_type(get_args(tp)[0])
    if origin in _UNION_ORIGINS:
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return unwrap_type(args[0])
    return tp


def is_optional(tp: Any) -> bool:
    """Check whether a type hint admits ``None``."""
    origin = get_origin(tp)
    if origin is Annotated:
        return is_optional(get_args(tp)[0])
    return origin in _UNION_ORIGINS and type(None) in get_args(tp)


def is_interface(tp: Any) -> bool:
    """Interfaces are Protocol classes and abstract base classes."""
    tp = unwrap_type(tp)
    if not inspect.isclass(tp):
        return False
    return bool(getattr(tp, "_is_protocol", False)) or inspect.isabstract(tp)


def _derive_property_name(name: str, prefixes: Tuple[str, ...]) -> Optional[str]:
    """Derive ``timeout`` from ``set_timeout`` / ``setTimeout`` style names."""
    for prefix in prefixes:
        if not name.startswith(prefix):
            continue
        rest = name[len(prefix):]
        if rest.startswith("_"):
            rest = rest[1:]
        elif not rest[:1].isupper():
            continue
        if rest:
            return rest[:1].lower() + rest[1:]
    return None


def setter_property_name(name: str) -> Optional[str]:
    return _derive_property_name(name, ("set", "with"))


def accessor_property_name(name: str) -> Optional[str]:
    """Any method starting with ``get``: ``get_foo``, ``getFoo`` and ``getfoo`` all read ``foo``."""
    if not name.startswith("get"):
        return None
    rest = name[len("get"):]
    if rest.startswith("_"):
        rest = rest[1:]
    if not rest:
        return None
    return rest[:1].lower() + rest[1:]


def _is_static_or_final(hint: Any) -> bool:
    if hint is ClassVar or hint is Final:
        return True
    return get_origin(hint) in (ClassVar, Final)


def _field_bindings(cls: type, descriptor: ConfigurationDescriptor) -> Tuple[Binding, ...]:
    try:
        hints = get_type_hints(cls, include_extras=True)
    except Exception as e:
        raise MappingError(cls, "<annotations>", f"cannot resolve type hints: {e}") from e

    bindings = []
    for name, hint in hints.items():
        if name.startswith("_") or name in descriptor.transient:
            continue
        if _is_static_or_final(hint):
            continue
        bindings.append(Binding(
            member=name,
            property_name=name,
            target_type=unwrap_type(hint) if is_interface(hint) else hint,
            kind=BindingKind.FIELD,
            is_interface=is_interface(hint),
        ))
    return tuple(bindings)


def _setter_bindings(cls: type, descriptor: ConfigurationDescriptor) -> Tuple[Binding, ...]:
    bindings = []
    for name, func in inspect.getmembers(cls, inspect.isfunction):
        property_name = setter_property_name(name)
        if property_name is None or property_name in descriptor.transient:
            continue
        if isinstance(inspect.getattr_static(cls, name), staticmethod):
            continue

        parameters = list(inspect.signature(func).parameters.values())[1:]
        if len(parameters) != 1 or parameters[0].kind not in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            continue

        try:
            hints = get_type_hints(func, include_extras=True)
        except Exception as e:
            raise MappingError(cls, name, f"cannot resolve type hints: {e}") from e

        hint = hints.get(parameters[0].name, Any)
        bindings.append(Binding(
            member=name,
            property_name=property_name,
            target_type=unwrap_type(hint) if is_interface(hint) else hint,
            kind=BindingKind.SETTER,
            is_interface=is_interface(hint),
        ))
    return tuple(bindings)


def binding_table(cls: type) -> Optional[BindingTable]:
    """Build (once) the binding table of a configuration class.

    Returns None when the class carries no configuration descriptor. Tables
    are cached per class for as long as the class is alive.
    """
    with _TABLES_LOCK:
        if cls in _TABLES:
            return _TABLES[cls]

    table = _build_binding_table(cls)
    with _TABLES_LOCK:
        return _TABLES.setdefault(cls, table)


def _build_binding_table(cls: type) -> Optional[BindingTable]:
    descriptor = get_descriptor(cls)
    if descriptor is None:
        return None

    return BindingTable(
        descriptor=descriptor,
        fields=_field_bindings(cls, descriptor) if descriptor.allow_fields else (),
        setters=_setter_bindings(cls, descriptor) if descriptor.allow_setters else (),
    )
