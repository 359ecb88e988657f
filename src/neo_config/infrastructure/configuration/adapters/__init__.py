"""Default collaborator implementations for the configuration runtime."""

from .decoder import PydanticDecoder, get_default_decoder
from .interpolator import ConfigStrInterpolator
from .ioc import NullIoCResolver, MappingIoCResolver, NULL_IOC_RESOLVER

__all__ = [
    "PydanticDecoder",
    "get_default_decoder",
    "ConfigStrInterpolator",
    "NullIoCResolver",
    "MappingIoCResolver",
    "NULL_IOC_RESOLVER",
]
