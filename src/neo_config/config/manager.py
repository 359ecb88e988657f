"""Configuration manager for neo-config.

Wires one configuration store with the reconciler, property handles, the
binder and the proxy factory. Reconciliations through the manager are
serialized, so at most one update is applied to its store at a time.
"""

import logging
import threading
from typing import Any, Mapping, Optional, Type, TypeVar

from ..infrastructure.configuration import (
    ConfigStore, UpdateResult, ConfigurationStore,
    Reconciler, ReconciliationSummary, PropertyFactory, PropertyHandle,
    ConfigBinder, ProxyFactory,
    Decoder, StrInterpolator, IoCResolver, PolledConfigurationSource,
)
from ..infrastructure.configuration.adapters import get_default_decoder, ConfigStrInterpolator
from .settings import RuntimeSettings, get_runtime_settings


logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigurationManager:
    """Facade over the configuration runtime for one store."""

    def __init__(
        self,
        store: Optional[ConfigurationStore] = None,
        settings: Optional[RuntimeSettings] = None,
        decoder: Optional[Decoder] = None,
        interpolator: Optional[StrInterpolator] = None,
        ioc: Optional[IoCResolver] = None,
    ):
        self._store = store if store is not None else ConfigStore()
        self._settings = settings or get_runtime_settings()
        self._ioc = ioc
        self._update_lock = threading.Lock()

        decoder = decoder or get_default_decoder()
        interpolator = interpolator or ConfigStrInterpolator()

        self._reconciler = Reconciler()
        self._properties = PropertyFactory(self._store, decoder)
        self._binder = ConfigBinder(
            decoder=decoder,
            interpolator=interpolator,
            allow_post_configure=self._settings.allow_post_configure,
            separator=self._settings.prefix_separator,
        )
        self._proxies = ProxyFactory(interpolator, separator=self._settings.prefix_separator)

    @property
    def store(self) -> ConfigurationStore:
        return self._store

    @property
    def settings(self) -> RuntimeSettings:
        return self._settings

    @property
    def properties(self) -> PropertyFactory:
        return self._properties

    def apply_update(
        self,
        result: Optional[UpdateResult],
        ignore_deletes: Optional[bool] = None,
    ) -> ReconciliationSummary:
        """Reconcile an update result into the store."""
        if ignore_deletes is None:
            ignore_deletes = self._settings.ignore_deletes_from_source

        with self._update_lock:
            summary = self._reconciler.reconcile(result, self._store, ignore_deletes)

        if summary:
            logger.info(
                f"Applied {result!r}: {len(summary.added)} added, {len(summary.changed)} changed, "
                f"{len(summary.nulled)} nulled, {len(summary.deleted)} deleted"
            )
        return summary

    def poll(
        self,
        source: PolledConfigurationSource,
        initial: bool = False,
        checkpoint: Optional[Any] = None,
    ) -> ReconciliationSummary:
        """Pull one update from a source and apply it.

        Source failures propagate to the caller, which owns retry and backoff.
        """
        result = source.poll(initial, checkpoint)
        return self.apply_update(result)

    def get_property(self, name: str, property_type: Any = Any, default: Any = None) -> PropertyHandle:
        """Get a live handle for a property."""
        return self._properties.get_property(name, property_type, default)

    def map_config(self, target: Any, ioc: Optional[IoCResolver] = None) -> Any:
        """Bind current values onto ``target`` and return it."""
        self._binder.map_config(target, self._store, ioc or self._ioc)
        return target

    def new_proxy(self, interface: Type[T]) -> T:
        """Build a live proxy for a configuration interface."""
        return self._proxies.new_proxy(interface, self._properties)


def create_config_manager(
    initial: Optional[Mapping[str, Any]] = None,
    settings: Optional[RuntimeSettings] = None,
    ioc: Optional[IoCResolver] = None,
) -> ConfigurationManager:
    """Create a configuration manager over a freshly seeded store."""
    return ConfigurationManager(ConfigStore(initial), settings=settings, ioc=ioc)
