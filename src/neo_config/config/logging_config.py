"""Centralized logging configuration for neo-config.

Provides consistent, configurable logging with environment-based control over
verbosity, format and the chattiness of the reconciliation path.
"""

import logging
import logging.config
import os
from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


def get_format_string(log_format: str) -> str:
    """Return the formatter pattern for a log format name."""
    if log_format == LogFormat.JSON.value:
        return '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}'
    if log_format == LogFormat.DETAILED.value:
        return "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
    return "%(asctime)s - %(levelname)s - %(message)s"


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Per-key mutation tracing is very noisy under frequent polling
    RECONCILE_MODULES = [
        "neo_config.infrastructure.configuration.services.reconciler",
        "neo_config.infrastructure.configuration.entities.store",
    ]
    
    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "pydantic",
    ]
    
    @classmethod
    def build_config(cls) -> dict:
        """Build a dictConfig mapping from environment variables."""
        log_verbosity = os.getenv("LOG_VERBOSITY", "NORMAL").upper()
        log_format = os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value).lower()
        enable_reconcile_logging = os.getenv("ENABLE_RECONCILE_LOGGING", "false").lower() == "true"
        
        # An explicit LOG_LEVEL wins over the verbosity mode
        explicit_level = os.getenv("LOG_LEVEL")
        if explicit_level and explicit_level.upper() in LogLevel.__members__:
            effective_log_level = explicit_level.upper()
        else:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)
        
        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": get_format_string(log_format),
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {}
        }
        
        if not enable_reconcile_logging:
            for module in cls.RECONCILE_MODULES:
                logging_config["loggers"][module] = {
                    "level": "WARNING" if effective_log_level != "DEBUG" else "DEBUG",
                    "handlers": ["console"],
                    "propagate": False,
                }
        
        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }
        
        return logging_config
    
    @classmethod
    def configure(cls) -> None:
        """Configure logging based on environment variables."""
        logging_config = cls.build_config()
        logging.config.dictConfig(logging_config)
        
        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={logging_config['root']['level']}")


def setup_logging() -> None:
    """Setup logging configuration from environment variables.
    
    Called once when the package is imported.
    """
    LoggingConfig.configure()
