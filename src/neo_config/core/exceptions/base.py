"""Base exceptions for neo-config.

This module defines the base exception hierarchy for the neo-config library.
All exceptions inherit from NeoConfigError and carry an error code and a
details dictionary for structured reporting.
"""

from typing import Any, Dict, Optional


class NeoConfigError(Exception):
    """Base exception for all neo-config errors.
    
    All exceptions in the neo-config library inherit from this base class
    and include structured error information for better debugging.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the error for logs or diagnostics."""
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }
