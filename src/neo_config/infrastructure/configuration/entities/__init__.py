"""Configuration entities package.

Domain entities and protocols for the configuration runtime.
"""

from .store import ConfigStore, StoreEvent, StoreListener
from .update import UpdateResult
from .descriptor import (
    ConfigurationDescriptor,
    configuration,
    default_value,
    get_descriptor,
)
from .bindings import (
    Binding,
    BindingKind,
    BindingTable,
    binding_table,
    is_interface,
)
from .protocols import (
    ConfigurationStore,
    Decoder,
    StrInterpolator,
    IoCResolver,
    PolledConfigurationSource,
)

__all__ = [
    # Domain entities
    "ConfigStore",
    "StoreEvent",
    "StoreListener",
    "UpdateResult",

    # Descriptors and binding tables
    "ConfigurationDescriptor",
    "configuration",
    "default_value",
    "get_descriptor",
    "Binding",
    "BindingKind",
    "BindingTable",
    "binding_table",
    "is_interface",

    # Protocols
    "ConfigurationStore",
    "Decoder",
    "StrInterpolator",
    "IoCResolver",
    "PolledConfigurationSource",
]
