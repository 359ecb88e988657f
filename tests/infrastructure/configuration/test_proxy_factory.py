"""Tests for live configuration proxies."""

from abc import ABC, abstractmethod
from typing import Optional, Protocol

import pytest

from neo_config.core.exceptions import ConfigurationError, DecodeError
from neo_config.infrastructure.configuration import (
    ConfigStore,
    PropertyFactory,
    UpdateResult,
    configuration,
    default_value,
)


@configuration(prefix="p")
class FooSettings(Protocol):
    @default_value("0")
    def get_foo(self) -> int: ...

    def get_label(self) -> Optional[str]: ...

    @default_value("true")
    def getEnabled(self) -> bool: ...

    def describe(self) -> str: ...


@configuration(prefix="p")
class MissingDefaultSettings(Protocol):
    def get_bar(self) -> int: ...


@configuration(prefix="p")
class BadDefaultSettings(Protocol):
    @default_value("not-a-number")
    def get_bar(self) -> int: ...


@configuration(prefix="${service}.http")
class HttpSettings(ABC):
    @abstractmethod
    @default_value("30")
    def get_timeout(self) -> int: ...

    @abstractmethod
    def close(self) -> None: ...


class UnprefixedSettings(Protocol):
    def get_region(self) -> Optional[str]: ...


@configuration(prefix="p")
class LowercaseAccessorSettings(Protocol):
    @default_value("1")
    def getfoo(self) -> int: ...

    @default_value("1")
    def get2fa(self) -> int: ...


@configuration(prefix="p")
class LowercaseMissingDefaultSettings(Protocol):
    def getbar(self) -> int: ...


class TestProxyConstruction:
    """Test cases for building proxies."""

    def test_builds_instance_of_interface(self, proxy_factory, property_factory):
        """Test that the proxy implements the interface."""
        proxy = proxy_factory.new_proxy(FooSettings, property_factory)

        assert FooSettings in type(proxy).__mro__
        assert set(proxy.__property_handles__) == {"get_foo", "get_label", "getEnabled"}

    def test_handles_are_bound_to_prefixed_names(self, proxy_factory, property_factory):
        """Test that property names derive from accessor names under the prefix."""
        proxy = proxy_factory.new_proxy(FooSettings, property_factory)
        handles = proxy.__property_handles__

        assert handles["get_foo"].name == "p.foo"
        assert handles["get_label"].name == "p.label"
        assert handles["getEnabled"].name == "p.enabled"
        assert handles["get_foo"].default == 0
        assert handles["getEnabled"].default is True

    def test_missing_default_on_primitive_fails_at_build(self, proxy_factory, property_factory, mocker):
        """Test that a primitive accessor without default is rejected before any call."""
        spy = mocker.spy(property_factory, "get_property")

        with pytest.raises(ConfigurationError, match="get_bar"):
            proxy_factory.new_proxy(MissingDefaultSettings, property_factory)

        spy.assert_not_called()

    def test_undecodable_default_fails_at_build(self, proxy_factory, property_factory):
        """Test that a bad default literal fails fast."""
        with pytest.raises(DecodeError):
            proxy_factory.new_proxy(BadDefaultSettings, property_factory)

    def test_abstract_interface_prefix_is_interpolated(self, proxy_factory):
        """Test ABC interfaces and ${...} prefixes resolved from the store."""
        store = ConfigStore({"service": "orders", "orders.http.timeout": "5"})
        proxy = proxy_factory.new_proxy(HttpSettings, PropertyFactory(store))

        assert proxy.get_timeout() == 5
        with pytest.raises(NotImplementedError):
            proxy.close()

    def test_interface_without_descriptor_uses_empty_prefix(self, proxy_factory, property_factory, store):
        """Test that undecorated interfaces read bare property names."""
        store.add("region", "eu")

        proxy = proxy_factory.new_proxy(UnprefixedSettings, property_factory)

        assert proxy.get_region() == "eu"

    def test_lowercase_accessors_are_dispatched(self, proxy_factory, property_factory, store):
        """Test that any get-prefixed method reads the store, whatever follows get."""
        store.add("p.2fa", "5")
        store.add("p.foo", "9")

        proxy = proxy_factory.new_proxy(LowercaseAccessorSettings, property_factory)

        assert proxy.get2fa() == 5
        assert proxy.getfoo() == 9
        assert proxy.__property_handles__["get2fa"].name == "p.2fa"
        assert proxy.__property_handles__["getfoo"].name == "p.foo"

    def test_lowercase_primitive_accessor_without_default_fails(self, proxy_factory, property_factory):
        """Test the build-time default check for lowercase accessor names."""
        with pytest.raises(ConfigurationError, match="getbar"):
            proxy_factory.new_proxy(LowercaseMissingDefaultSettings, property_factory)

    def test_rejects_non_class_targets(self, proxy_factory, property_factory):
        """Test that only classes can be proxied."""
        with pytest.raises(ConfigurationError):
            proxy_factory.new_proxy("FooSettings", property_factory)


class TestProxyLiveness:
    """Proxies re-read the store on every call."""

    def test_reflects_reconciled_values(self, proxy_factory, property_factory, store, reconciler):
        """Test that successive calls observe successive reconciliations."""
        proxy = proxy_factory.new_proxy(FooSettings, property_factory)

        reconciler.reconcile(UpdateResult.create_full({"p.foo": 5}), store)
        assert proxy.get_foo() == 5

        reconciler.reconcile(UpdateResult.create_full({"p.foo": 7}), store)
        assert proxy.get_foo() == 7

    def test_falls_back_to_defaults(self, proxy_factory, property_factory, store):
        """Test defaults for missing and tombstoned values."""
        proxy = proxy_factory.new_proxy(FooSettings, property_factory)

        assert proxy.get_foo() == 0
        assert proxy.get_label() is None
        assert proxy.getEnabled() is True

        store.add("p.enabled", "false")
        store.add("p.label", "primary")
        assert proxy.getEnabled() is False
        assert proxy.get_label() == "primary"

        store.set("p.label", None)
        assert proxy.get_label() is None

    def test_decodes_raw_strings(self, proxy_factory, property_factory, store):
        """Test that string values are decoded to the return type."""
        store.add("p.foo", "42")

        proxy = proxy_factory.new_proxy(FooSettings, property_factory)

        assert proxy.get_foo() == 42
