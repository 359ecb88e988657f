"""Configuration module for neo-config.

Runtime settings, logging setup and the ConfigurationManager facade.
"""

# Logging configuration
from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

# Runtime settings
from .settings import RuntimeSettings, get_runtime_settings

# Configuration manager
from .manager import ConfigurationManager, create_config_manager

__all__ = [
    # Logging
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",

    # Settings
    "RuntimeSettings",
    "get_runtime_settings",

    # Manager
    "ConfigurationManager",
    "create_config_manager",
]
