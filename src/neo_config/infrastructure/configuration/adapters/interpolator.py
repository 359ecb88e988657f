"""String interpolation of ``${name}`` references.

References resolve against a lookup function (usually the configuration
store). Resolved values are interpolated in turn; references that resolve to
nothing are left verbatim.
"""

import re
from typing import Any, Callable, Optional, Tuple

from ....core.exceptions import ConfigurationError


_REFERENCE = re.compile(r"\$\{([^${}]+)\}")


class ConfigStrInterpolator:
    """Resolves ``${name}`` references recursively with cycle detection."""

    def resolve(self, text: str, lookup: Callable[[str], Optional[Any]]) -> str:
        return self._resolve(text, lookup, ())

    def _resolve(self, text: str, lookup: Callable[[str], Optional[Any]], stack: Tuple[str, ...]) -> str:
        if "${" not in text:
            return text

        def replace(match: "re.Match[str]") -> str:
            name = match.group(1).strip()
            if name in stack:
                chain = " -> ".join(stack + (name,))
                raise ConfigurationError(
                    f"Circular property reference: {chain}",
                    details={"reference": name},
                )
            value = lookup(name)
            if value is None:
                return match.group(0)
            return self._resolve(str(value), lookup, stack + (name,))

        return _REFERENCE.sub(replace, text)
