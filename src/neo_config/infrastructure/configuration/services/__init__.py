"""Configuration services package.

Reconciliation of source updates, live property handles, object binding and
interface proxies.
"""

from .reconciler import Reconciler, ReconciliationSummary
from .property_handle import PropertyHandle, PropertyFactory
from .prefix import resolve_prefix
from .binder import ConfigBinder
from .proxy_factory import ProxyFactory

__all__ = [
    "Reconciler",
    "ReconciliationSummary",
    "PropertyHandle",
    "PropertyFactory",
    "resolve_prefix",
    "ConfigBinder",
    "ProxyFactory",
]
