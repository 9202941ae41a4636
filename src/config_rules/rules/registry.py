from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger("config_rules.rules")
logger.addHandler(logging.NullHandler())


class RuleSet:
    """Ordered mapping of config key -> check specs, in registration order.

    Specs are stored as given; they are only resolved when validation runs.
    """

    def __init__(self) -> None:
        self._rules: Dict[str, List[Any]] = {}
        logger.debug("RuleSet initialized id=%s", hex(id(self)))

    def add(self, key: str, check: Any) -> None:
        self._rules.setdefault(key, []).append(check)
        logger.debug(
            "Rule added: key=%r check=%r position=%d", key, check, len(self._rules[key]) - 1
        )

    def clear(self, key: Optional[str] = None) -> None:
        if key is None:
            logger.debug("Clearing all rules: keys=%d", len(self._rules))
            self._rules.clear()
            return
        removed = self._rules.pop(key, None)
        logger.debug("Cleared rules for key=%r (had %d)", key, len(removed or ()))

    def checks_for(self, key: str) -> Tuple[Any, ...]:
        return tuple(self._rules.get(key, ()))

    def items(self) -> List[Tuple[str, Tuple[Any, ...]]]:
        # Copied up front; rules added while a pass runs wait for the next pass.
        return [(key, tuple(checks)) for key, checks in self._rules.items()]

    def snapshot(self) -> MappingProxyType[str, Tuple[Any, ...]]:
        return MappingProxyType({k: tuple(v) for k, v in self._rules.items()})

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._rules)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __len__(self) -> int:
        return len(self._rules)
