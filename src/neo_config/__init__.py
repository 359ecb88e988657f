"""Neo-Config - dynamic configuration runtime for NeoMultiTenant services.

Keeps an in-memory configuration store synchronized with snapshots or diffs
pulled from an external source, and exposes its values through one-shot
object binding and live interface proxies.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    ConfigurationManager,
    create_config_manager,
    RuntimeSettings,
    get_runtime_settings,
)

from .infrastructure.configuration import (
    # Store and updates
    ConfigStore,
    StoreEvent,
    UpdateResult,

    # Declarations
    configuration,
    default_value,

    # Services
    Reconciler,
    ReconciliationSummary,
    PropertyHandle,
    PropertyFactory,
    ConfigBinder,
    ProxyFactory,

    # Collaborators
    PydanticDecoder,
    ConfigStrInterpolator,
    NullIoCResolver,
    MappingIoCResolver,
)

from .core.exceptions import (
    NeoConfigError,
    ConfigurationError,
    DecodeError,
    MappingError,
    StoreError,
)

__all__ = [
    # Manager
    "ConfigurationManager",
    "create_config_manager",
    "RuntimeSettings",
    "get_runtime_settings",

    # Store and updates
    "ConfigStore",
    "StoreEvent",
    "UpdateResult",

    # Declarations
    "configuration",
    "default_value",

    # Services
    "Reconciler",
    "ReconciliationSummary",
    "PropertyHandle",
    "PropertyFactory",
    "ConfigBinder",
    "ProxyFactory",

    # Collaborators
    "PydanticDecoder",
    "ConfigStrInterpolator",
    "NullIoCResolver",
    "MappingIoCResolver",

    # Exceptions
    "NeoConfigError",
    "ConfigurationError",
    "DecodeError",
    "MappingError",
    "StoreError",

    # Version
    "__version__",
]
