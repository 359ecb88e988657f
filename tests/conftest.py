"""Pytest configuration and fixtures for neo-config tests."""

import pytest

from neo_config.config.settings import RuntimeSettings
from neo_config.config.manager import ConfigurationManager
from neo_config.infrastructure.configuration import (
    ConfigStore,
    Reconciler,
    PropertyFactory,
    ConfigBinder,
    ProxyFactory,
    PydanticDecoder,
    ConfigStrInterpolator,
)


@pytest.fixture
def store():
    """Empty configuration store."""
    return ConfigStore()


@pytest.fixture
def seeded_store():
    """Store seeded with a few properties, one of them tombstoned."""
    return ConfigStore({
        "svc.timeout": "30",
        "svc.name": "orders",
        "svc.retired": None,
        "other.flag": "true",
    })


@pytest.fixture
def reconciler():
    """Stateless reconciler."""
    return Reconciler()


@pytest.fixture
def decoder():
    """Fresh pydantic decoder."""
    return PydanticDecoder()


@pytest.fixture
def interpolator():
    """Default ${...} interpolator."""
    return ConfigStrInterpolator()


@pytest.fixture
def property_factory(store, decoder):
    """Property factory over the empty store."""
    return PropertyFactory(store, decoder)


@pytest.fixture
def binder(decoder, interpolator):
    """Binder with post-configure hooks enabled."""
    return ConfigBinder(decoder=decoder, interpolator=interpolator)


@pytest.fixture
def proxy_factory(interpolator):
    """Proxy factory with the default interpolator."""
    return ProxyFactory(interpolator)


@pytest.fixture
def runtime_settings():
    """Explicit settings so tests do not depend on the environment."""
    return RuntimeSettings(
        ignore_deletes_from_source=False,
        allow_post_configure=True,
        prefix_separator=".",
    )


@pytest.fixture
def manager(store, runtime_settings):
    """Configuration manager over the empty store."""
    return ConfigurationManager(store, settings=runtime_settings)
