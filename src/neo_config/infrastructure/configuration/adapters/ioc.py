"""IoC resolvers for interface-typed configuration members.

The configuration value of an interface-typed field names an instance; the
resolver turns that name into the object to inject.
"""

from typing import Any, Mapping, Optional

from ....core.exceptions import ConfigurationError


class NullIoCResolver:
    """Resolver that never knows any instance."""

    def get_instance(self, name: str, interface: type) -> Optional[Any]:
        return None


class MappingIoCResolver:
    """Resolver backed by a fixed name -> instance mapping."""

    def __init__(self, instances: Mapping[str, Any]):
        self._instances = dict(instances)

    def get_instance(self, name: str, interface: type) -> Optional[Any]:
        instance = self._instances.get(name)
        if instance is None:
            return None

        try:
            matches = isinstance(instance, interface)
        except TypeError:
            # Protocols without @runtime_checkable cannot be checked
            matches = True

        if not matches:
            raise ConfigurationError(
                f"Instance '{name}' does not implement {interface.__name__}",
                details={"name": name, "interface": interface.__name__},
            )
        return instance


NULL_IOC_RESOLVER = NullIoCResolver()
