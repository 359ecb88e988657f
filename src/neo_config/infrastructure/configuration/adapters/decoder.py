"""Pydantic-backed decoder for configuration values.

Raw store values (usually strings from a property source) are converted into
declared Python types with ``pydantic.TypeAdapter`` in lax mode, so ``"30"``
decodes to ``30`` and ``"true"`` to ``True``.
"""

import logging
import threading
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from ....core.exceptions import DecodeError
from ..entities.bindings import unwrap_type


logger = logging.getLogger(__name__)

_SCALARS = (bool, int, float)


class PydanticDecoder:
    """Decoder converting raw values through cached pydantic type adapters."""

    def __init__(self):
        self._lock = threading.Lock()
        self._adapters: Dict[Any, Optional[TypeAdapter]] = {}

    def decode(self, target_type: Any, raw_value: Any) -> Any:
        """Decode ``raw_value`` into ``target_type``.

        Raises:
            DecodeError: if the value cannot be converted.
        """
        if target_type is Any or target_type is object:
            return raw_value

        if unwrap_type(target_type) is str:
            if isinstance(raw_value, str):
                return raw_value
            if isinstance(raw_value, _SCALARS):
                return str(raw_value)

        adapter = self._adapter(target_type)
        if adapter is None:
            return self._construct(target_type, raw_value)

        try:
            return adapter.validate_python(raw_value)
        except ValidationError as e:
            reason = "; ".join(error["msg"] for error in e.errors())
            raise DecodeError(target_type, raw_value, reason) from e

    def _adapter(self, target_type: Any) -> Optional[TypeAdapter]:
        try:
            hash(target_type)
        except TypeError:
            return self._build_adapter(target_type)

        with self._lock:
            if target_type in self._adapters:
                return self._adapters[target_type]

        adapter = self._build_adapter(target_type)
        with self._lock:
            self._adapters[target_type] = adapter
        return adapter

    @staticmethod
    def _build_adapter(target_type: Any) -> Optional[TypeAdapter]:
        try:
            return TypeAdapter(target_type)
        except PydanticSchemaGenerationError:
            logger.debug(f"No pydantic schema for {target_type!r}, using constructor decoding")
            return None

    @staticmethod
    def _construct(target_type: Any, raw_value: Any) -> Any:
        """Fallback for arbitrary classes: accept instances or call ``target_type(raw)``."""
        if not isinstance(target_type, type):
            raise DecodeError(target_type, raw_value, "unsupported target type")
        if isinstance(raw_value, target_type):
            return raw_value
        try:
            return target_type(raw_value)
        except Exception as e:
            raise DecodeError(target_type, raw_value, str(e)) from e


@lru_cache(maxsize=1)
def get_default_decoder() -> PydanticDecoder:
    """Shared decoder instance."""
    return PydanticDecoder()
