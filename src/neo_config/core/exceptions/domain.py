"""Domain exceptions for neo-config.

Errors raised by the configuration core: proxy construction, value decoding,
object binding and store mutation.
"""

from typing import Any, Optional

from .base import NeoConfigError


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None) or repr(tp)


class ConfigurationError(NeoConfigError):
    """Raised when configuration metadata is unusable (e.g. a broken proxy interface)."""
    pass


class DecodeError(ConfigurationError):
    """Raised when a raw value cannot be converted to the declared type."""
    
    def __init__(self, target_type: Any, raw_value: Any, reason: Optional[str] = None):
        message = f"Unable to decode {raw_value!r} as {_type_name(target_type)}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            details={"target_type": _type_name(target_type), "raw_value": repr(raw_value)},
        )
        self.target_type = target_type
        self.raw_value = raw_value


class MappingError(NeoConfigError):
    """Raised when binding configuration onto an object fails.
    
    Identifies the target type and the member (field, setter, parameter or
    post-configure method) that could not be processed.
    """
    
    def __init__(self, target_type: type, member: str, reason: str):
        super().__init__(
            f"Unable to map {_type_name(target_type)}.{member}: {reason}",
            details={"target_type": _type_name(target_type), "member": member},
        )
        self.target_type = target_type
        self.member = member


class StoreError(NeoConfigError):
    """Raised when the configuration store rejects a mutation."""
    pass
