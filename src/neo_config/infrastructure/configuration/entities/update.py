"""Update results produced by polling a configuration source.

An UpdateResult is either a complete snapshot, authoritative over the whole
key space, or an incremental diff of added, changed and deleted properties.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union


def _freeze(values: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Any]]:
    if values is None:
        return None
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class UpdateResult:
    """Immutable result of one poll cycle."""

    complete: Optional[Mapping[str, Any]] = None
    added: Optional[Mapping[str, Any]] = None
    changed: Optional[Mapping[str, Any]] = None
    deleted: Optional[Mapping[str, Any]] = None
    incremental: bool = False

    @classmethod
    def create_full(cls, complete: Optional[Mapping[str, Any]]) -> "UpdateResult":
        """Create a full snapshot result."""
        return cls(complete=_freeze(complete), incremental=False)

    @classmethod
    def create_incremental(
        cls,
        added: Optional[Mapping[str, Any]] = None,
        changed: Optional[Mapping[str, Any]] = None,
        deleted: Optional[Union[Mapping[str, Any], Iterable[str]]] = None,
    ) -> "UpdateResult":
        """Create an incremental result.

        ``deleted`` may be a mapping (values are ignored) or an iterable of names.
        """
        if deleted is not None and not isinstance(deleted, Mapping):
            deleted = dict.fromkeys(deleted)

        return cls(
            added=_freeze(added),
            changed=_freeze(changed),
            deleted=_freeze(deleted),
            incremental=True,
        )

    @property
    def has_changes(self) -> bool:
        """Whether applying this result can change a store at all."""
        if not self.incremental:
            return self.complete is not None
        return bool(self.added) or bool(self.changed) or bool(self.deleted)

    def __repr__(self) -> str:
        if self.incremental:
            return (
                f"UpdateResult(incremental, added={len(self.added or {})}, "
                f"changed={len(self.changed or {})}, deleted={len(self.deleted or {})})"
            )
        size = "none" if self.complete is None else len(self.complete)
        return f"UpdateResult(full, complete={size})"
