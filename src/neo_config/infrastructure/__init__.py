"""Infrastructure package for neo-config.

Core infrastructure components:
- configuration/: store, reconciliation, binding and proxy runtime
"""

# Configuration infrastructure
from .configuration import *
from .configuration import __all__ as _configuration_all

__all__ = list(_configuration_all)
