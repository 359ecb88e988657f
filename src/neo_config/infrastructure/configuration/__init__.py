"""Configuration infrastructure for neo-config.

Infrastructure-level configuration runtime:
- entities/: the store, update results, descriptors, binding tables and protocols
- services/: reconciliation, property handles, binding and proxies
- adapters/: default decoder, interpolator and IoC resolvers
"""

# Core configuration entities and protocols
from .entities import (
    ConfigStore, StoreEvent, UpdateResult,
    ConfigurationDescriptor, configuration, default_value, get_descriptor,
    Binding, BindingKind, BindingTable, binding_table,
    ConfigurationStore, Decoder, StrInterpolator, IoCResolver,
    PolledConfigurationSource,
)

# Configuration services
from .services import (
    Reconciler, ReconciliationSummary,
    PropertyHandle, PropertyFactory,
    ConfigBinder, ProxyFactory,
)

# Default collaborators
from .adapters import (
    PydanticDecoder, ConfigStrInterpolator,
    NullIoCResolver, MappingIoCResolver,
)

__all__ = [
    # Entities
    "ConfigStore",
    "StoreEvent",
    "UpdateResult",
    "ConfigurationDescriptor",
    "configuration",
    "default_value",
    "get_descriptor",
    "Binding",
    "BindingKind",
    "BindingTable",
    "binding_table",

    # Protocols
    "ConfigurationStore",
    "Decoder",
    "StrInterpolator",
    "IoCResolver",
    "PolledConfigurationSource",

    # Services
    "Reconciler",
    "ReconciliationSummary",
    "PropertyHandle",
    "PropertyFactory",
    "ConfigBinder",
    "ProxyFactory",

    # Adapters
    "PydanticDecoder",
    "ConfigStrInterpolator",
    "NullIoCResolver",
    "MappingIoCResolver",
]
