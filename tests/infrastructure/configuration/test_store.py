"""Tests for the in-memory configuration store."""

import threading

import pytest

from neo_config.core.exceptions import StoreError
from neo_config.infrastructure.configuration import ConfigStore, StoreEvent


class TestConfigStore:
    """Test cases for ConfigStore."""

    def test_seeding_keeps_insertion_order(self):
        """Test that initial values are added in order."""
        store = ConfigStore({"b": 1, "a": 2, "c": None})

        assert store.keys() == ["b", "a", "c"]
        assert list(store) == ["b", "a", "c"]
        assert len(store) == 3

    def test_none_value_is_distinct_from_absence(self, store):
        """Test that a name holding None still counts as configured."""
        store.add("x", None)

        assert store.contains_key("x")
        assert "x" in store
        assert store.get("x", "fallback") is None
        assert store.get("missing", "fallback") == "fallback"

    def test_add_rejects_existing_name(self, store):
        """Test that add refuses to overwrite."""
        store.add("x", 1)

        with pytest.raises(StoreError, match="already present"):
            store.add("x", 2)

    @pytest.mark.parametrize("name", ["", None, 42])
    def test_add_rejects_invalid_names(self, store, name):
        """Test that names must be non-empty strings."""
        with pytest.raises(StoreError):
            store.add(name, "value")

    def test_set_overwrites_and_inserts(self, store):
        """Test set on present and absent names."""
        store.set("x", 1)
        store.set("x", 2)

        assert store.get("x") == 2

    def test_clear_absent_name_is_noop(self, store):
        """Test that clearing an unknown name does not fail."""
        store.clear("missing")

        assert len(store) == 0

    def test_snapshot_is_a_copy(self, seeded_store):
        """Test that mutating a snapshot does not affect the store."""
        snapshot = seeded_store.snapshot()
        snapshot["svc.timeout"] = "changed"

        assert seeded_store.get("svc.timeout") == "30"


class TestStoreListeners:
    """Test cases for mutation listeners."""

    def test_listener_receives_events(self, store, mocker):
        """Test that each mutation reports event, name, old and new values."""
        listener = mocker.Mock()
        store.add_listener(listener)

        store.add("x", 1)
        store.set("x", 2)
        store.clear("x")

        assert listener.call_args_list == [
            mocker.call(StoreEvent.ADDED, "x", None, 1),
            mocker.call(StoreEvent.CHANGED, "x", 1, 2),
            mocker.call(StoreEvent.CLEARED, "x", 2, None),
        ]

    def test_failing_listener_does_not_break_mutation(self, store, mocker):
        """Test that listener errors are isolated from the store and other listeners."""
        failing = mocker.Mock(side_effect=RuntimeError("boom"))
        healthy = mocker.Mock()
        store.add_listener(failing)
        store.add_listener(healthy)

        store.add("x", 1)

        assert store.get("x") == 1
        healthy.assert_called_once_with(StoreEvent.ADDED, "x", None, 1)

    def test_remove_listener(self, store, mocker):
        """Test that removed listeners are no longer notified."""
        listener = mocker.Mock()
        store.add_listener(listener)

        assert store.remove_listener(listener) is True
        assert store.remove_listener(listener) is False

        store.add("x", 1)
        listener.assert_not_called()


def test_concurrent_writers_and_readers():
    """Test that concurrent access leaves the store consistent."""
    store = ConfigStore()
    errors = []

    def writer(offset):
        for i in range(200):
            store.set(f"key.{offset}.{i}", i)

    def reader():
        try:
            for _ in range(200):
                for name in store.keys():
                    store.get(name)
        except Exception as e:  # pragma: no cover - only hit on a race
            errors.append(e)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    threads += [threading.Thread(target=reader) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(store) == 800
