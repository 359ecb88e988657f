"""Configuration descriptors for bindable classes and proxy interfaces.

A class becomes bindable by decorating it with :func:`configuration`, which
records a :class:`ConfigurationDescriptor` on the class. Accessors on proxy
interfaces declare their fallback with :func:`default_value`.

Example::

    @configuration(prefix="app.${env}", params=("env",), post_configure="init")
    class ServiceConfig:
        env: str = "dev"
        timeout: int = 10

        def init(self) -> None:
            ...
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple, TypeVar, FrozenSet


DESCRIPTOR_ATTRIBUTE = "__neo_config_descriptor__"
DEFAULT_VALUE_ATTRIBUTE = "__neo_config_default__"

C = TypeVar("C", bound=type)
F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class ConfigurationDescriptor:
    """Binding options declared on a configuration class or interface."""

    prefix: str = ""
    params: Tuple[str, ...] = ()
    allow_fields: bool = True
    allow_setters: bool = True
    post_configure: Optional[str] = None
    transient: FrozenSet[str] = frozenset()


def configuration(
    prefix: str = "",
    *,
    params: Iterable[str] = (),
    allow_fields: bool = True,
    allow_setters: bool = True,
    post_configure: Optional[str] = None,
    transient: Iterable[str] = (),
) -> Callable[[C], C]:
    """Mark a class as bindable from configuration."""
    descriptor = ConfigurationDescriptor(
        prefix=prefix,
        params=tuple(params),
        allow_fields=allow_fields,
        allow_setters=allow_setters,
        post_configure=post_configure or None,
        transient=frozenset(transient),
    )

    def decorate(cls: C) -> C:
        setattr(cls, DESCRIPTOR_ATTRIBUTE, descriptor)
        return cls

    return decorate


def get_descriptor(cls: type) -> Optional[ConfigurationDescriptor]:
    """Return the descriptor declared on a class or inherited from a base."""
    descriptor = getattr(cls, DESCRIPTOR_ATTRIBUTE, None)
    if isinstance(descriptor, ConfigurationDescriptor):
        return descriptor
    return None


def default_value(literal: Any) -> Callable[[F], F]:
    """Declare the default literal of a proxy accessor method."""

    def decorate(func: F) -> F:
        setattr(func, DEFAULT_VALUE_ATTRIBUTE, literal)
        return func

    return decorate
