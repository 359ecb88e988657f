"""Reconciliation of polled update results into the configuration store.

A full result is authoritative: every property it carries is added or
changed, and every stored property it no longer carries is deleted unless
deletes from the source are ignored. An incremental result adds and changes
the properties it names and deletes the ones it lists as deleted, leaving
everything else untouched.

Setting a property to ``None`` keeps the key present with a ``None`` value;
only an explicit delete removes the key.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..entities.protocols import ConfigurationStore
from ..entities.update import UpdateResult


logger = logging.getLogger(__name__)


@dataclass
class ReconciliationSummary:
    """Names mutated by one reconciliation pass."""

    added: List[str] = field(default_factory=list)
    changed: List[str] = field(default_factory=list)
    nulled: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)

    @property
    def upserts(self) -> int:
        """Number of add-or-change mutations performed."""
        return len(self.added) + len(self.changed) + len(self.nulled)

    @property
    def total(self) -> int:
        return self.upserts + len(self.deleted)

    def __bool__(self) -> bool:
        return self.total > 0


class Reconciler:
    """Applies UpdateResults onto a configuration store.

    Calls for a given store must be serialized by the caller; the reconciler
    holds no state between calls.
    """

    def reconcile(
        self,
        result: Optional[UpdateResult],
        store: ConfigurationStore,
        ignore_deletes: bool = False,
    ) -> ReconciliationSummary:
        """Apply ``result`` to ``store`` and report what changed."""
        summary = ReconciliationSummary()

        if result is None or not result.has_changes:
            return summary

        logger.debug(f"incremental result? [{result.incremental}]")
        logger.debug(f"ignored deletes from source? [{ignore_deletes}]")

        if not result.incremental:
            self._apply_full(result.complete, store, ignore_deletes, summary)
        else:
            self._apply_incremental(result, store, ignore_deletes, summary)

        return summary

    def _apply_full(
        self,
        complete: Optional[Mapping[str, Any]],
        store: ConfigurationStore,
        ignore_deletes: bool,
        summary: ReconciliationSummary,
    ) -> None:
        if complete is None:
            return

        for name, value in complete.items():
            self._add_or_change(name, value, store, summary)

        if ignore_deletes:
            return

        stale = [name for name in store.keys() if name not in complete]
        for name in stale:
            self._delete(name, store, summary)

    def _apply_incremental(
        self,
        result: UpdateResult,
        store: ConfigurationStore,
        ignore_deletes: bool,
        summary: ReconciliationSummary,
    ) -> None:
        for props in (result.added, result.changed):
            if props is None:
                continue
            for name, value in props.items():
                self._add_or_change(name, value, store, summary)

        if not ignore_deletes and result.deleted is not None:
            for name in result.deleted:
                self._delete(name, store, summary)

    def _add_or_change(
        self,
        name: str,
        new_value: Any,
        store: ConfigurationStore,
        summary: ReconciliationSummary,
    ) -> None:
        if not store.contains_key(name):
            logger.debug(f"adding property key [{name}], value [{new_value}]")
            store.add(name, new_value)
            summary.added.append(name)
            return

        old_value = store.get(name)
        if new_value is not None:
            if new_value is not old_value and new_value != old_value:
                logger.debug(f"updating property key [{name}], value [{new_value}]")
                store.set(name, new_value)
                summary.changed.append(name)
        elif old_value is not None:
            logger.debug(f"nulling out property key [{name}]")
            store.set(name, None)
            summary.nulled.append(name)

    def _delete(self, name: str, store: ConfigurationStore, summary: ReconciliationSummary) -> None:
        if store.contains_key(name):
            logger.debug(f"deleting property key [{name}]")
            store.clear(name)
            summary.deleted.append(name)
