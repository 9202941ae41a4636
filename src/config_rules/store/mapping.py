from __future__ import annotations

import logging
from collections.abc import Mapping
from copy import deepcopy
from typing import Any, Mapping as MappingT, Optional

logger = logging.getLogger("config_rules.store")
logger.addHandler(logging.NullHandler())

_MISSING = object()


class MappingStore:
    """Read-only store over nested mappings.

    ``get("db.port")`` walks ``data["db"]["port"]``. A literal top-level key that
    contains the separator takes precedence over the nested lookup.
    """

    def __init__(self, data: Optional[MappingT[str, Any]] = None, separator: str = ".") -> None:
        if not separator:
            raise ValueError("separator must be a non-empty string")
        self._data: MappingT[str, Any] = data if data is not None else {}
        self._separator = separator
        logger.debug("MappingStore init keys=%d separator=%r", len(self._data), separator)

    @property
    def separator(self) -> str:
        return self._separator

    def get(self, key: str, default: Any = None) -> Any:
        value = self._lookup(key)
        if value is _MISSING:
            logger.debug("Store.get key=%r -> missing", key)
            return default
        return deepcopy(value)

    def _lookup(self, key: str) -> Any:
        if key in self._data:
            return self._data[key]
        node: Any = self._data
        for part in key.split(self._separator):
            if not isinstance(node, Mapping) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._lookup(key) is not _MISSING
