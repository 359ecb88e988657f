"""Resolution of configuration name prefixes."""

from typing import Any, Mapping, Optional

from ..entities.protocols import ConfigurationStore, StrInterpolator


def resolve_prefix(
    prefix: str,
    store: ConfigurationStore,
    interpolator: StrInterpolator,
    separator: str = ".",
    params: Optional[Mapping[str, Any]] = None,
) -> str:
    """Resolve ``${...}`` placeholders in a declared prefix.

    Placeholders naming one of ``params`` are substituted first; the rest are
    resolved against store values. A non-empty result always ends with
    ``separator``.
    """
    if params:
        prefix = interpolator.resolve(prefix, params.get)

    prefix = interpolator.resolve(prefix, store.get)

    if prefix and not prefix.endswith(separator):
        prefix += separator
    return prefix
