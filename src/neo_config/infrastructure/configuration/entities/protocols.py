"""Protocol interfaces for the configuration runtime's collaborators.

Defines the narrow contracts the core consumes: the store it reconciles, the
decoder and interpolator it reads through, the IoC resolver used for
interface-typed members, and the polled source that produces update results.
"""

from abc import abstractmethod
from typing import Any, Callable, Iterator, List, Optional, Protocol, runtime_checkable

from .update import UpdateResult


@runtime_checkable
class ConfigurationStore(Protocol):
    """Protocol for the mutable configuration store."""

    @abstractmethod
    def contains_key(self, name: str) -> bool:
        """Check whether a name is configured."""
        ...

    @abstractmethod
    def get(self, name: str, default: Any = None) -> Any:
        """Get the value stored under a name."""
        ...

    @abstractmethod
    def add(self, name: str, value: Any) -> None:
        """Insert an absent name."""
        ...

    @abstractmethod
    def set(self, name: str, value: Any) -> None:
        """Overwrite the value of a name."""
        ...

    @abstractmethod
    def clear(self, name: str) -> None:
        """Remove a name."""
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        """Names currently held."""
        ...

    def __iter__(self) -> Iterator[str]:
        ...


@runtime_checkable
class Decoder(Protocol):
    """Protocol for converting raw values into declared types."""

    @abstractmethod
    def decode(self, target_type: Any, raw_value: Any) -> Any:
        """Decode a raw value, raising DecodeError on failure."""
        ...


@runtime_checkable
class StrInterpolator(Protocol):
    """Protocol for resolving ``${name}`` references inside strings."""

    @abstractmethod
    def resolve(self, text: str, lookup: Callable[[str], Optional[Any]]) -> str:
        """Resolve references using a name lookup."""
        ...


@runtime_checkable
class IoCResolver(Protocol):
    """Protocol for resolving named instances of interface types."""

    @abstractmethod
    def get_instance(self, name: str, interface: type) -> Optional[Any]:
        """Return the instance registered under ``name`` or None."""
        ...


@runtime_checkable
class PolledConfigurationSource(Protocol):
    """Protocol for sources polled by a scheduler."""

    @abstractmethod
    def poll(self, initial: bool, checkpoint: Optional[Any] = None) -> Optional[UpdateResult]:
        """Fetch the next update result (full on the initial poll)."""
        ...
