"""Exceptions module for neo-config.

This module provides the complete exception hierarchy for neo-config.
"""

from .base import NeoConfigError

from .domain import (
    ConfigurationError,
    DecodeError,
    MappingError,
    StoreError,
)

__all__ = [
    "NeoConfigError",
    "ConfigurationError",
    "DecodeError",
    "MappingError",
    "StoreError",
]
