from __future__ import annotations

import inspect
import logging
from types import MappingProxyType
from typing import Any, List, Optional, Tuple

from config_rules.checks import CheckSpec, resolve_check
from config_rules.exceptions import ConfigStoreError, ConfigValidationError
from config_rules.rules import RuleSet
from config_rules.store import StoreProtocol
from config_rules.utils import _redact_for_log

logger = logging.getLogger("config_rules.validator")
logger.addHandler(logging.NullHandler())

__all__ = ["Validator", "create_validator"]


class Validator:
    """
    Runs registered checks against values read from a configuration store.

    Rules are check specs keyed by config key. They are resolved lazily, so a
    malformed spec only surfaces when ``validate`` reaches it. By default the
    first failing check raises; with ``silent=True`` every check runs and the
    failures are returned.
    """

    def __init__(
        self, store: Optional[StoreProtocol] = None, rules: Optional[RuleSet] = None
    ) -> None:
        self._store = store
        self._rules = rules if rules is not None else RuleSet()

    @property
    def store(self) -> Optional[StoreProtocol]:
        return self._store

    @property
    def rules(self) -> MappingProxyType[str, Tuple[Any, ...]]:
        return self._rules.snapshot()

    def add_rule(self, key: str, check: CheckSpec) -> None:
        self._rules.add(key, check)

    def clear_rules(self, key: Optional[str] = None) -> None:
        self._rules.clear(key)

    def validate(
        self, store: Optional[StoreProtocol] = None, *, silent: bool = False
    ) -> List[ConfigValidationError]:
        source = self._resolve_store(store)
        errors: List[ConfigValidationError] = []
        logger.debug("Validate start: keys=%d silent=%s", len(self._rules), silent)
        for key, checks in self._rules.items():
            value = source.get(key)
            if inspect.isawaitable(value):
                close = getattr(value, "close", None)
                if callable(close):
                    close()
                logger.error("Store.get(%r) returned an awaitable in sync validate", key)
                raise ConfigStoreError("store.get returned an awaitable; use validate_async")
            self._run_checks(key, checks, value, silent, errors)
        logger.debug("Validate done: errors=%d", len(errors))
        return errors

    async def validate_async(
        self, store: Optional[StoreProtocol] = None, *, silent: bool = False
    ) -> List[ConfigValidationError]:
        """Same as ``validate`` but awaits ``store.get`` results that are awaitable."""
        source = self._resolve_store(store)
        errors: List[ConfigValidationError] = []
        logger.debug("Validate (async) start: keys=%d silent=%s", len(self._rules), silent)
        for key, checks in self._rules.items():
            value = source.get(key)
            if inspect.isawaitable(value):
                value = await value
            self._run_checks(key, checks, value, silent, errors)
        logger.debug("Validate (async) done: errors=%d", len(errors))
        return errors

    def _resolve_store(self, store: Optional[StoreProtocol]) -> StoreProtocol:
        source = store if store is not None else self._store
        if source is None:
            logger.error("Validate called without a store and none is bound")
            raise ConfigStoreError("No store given and no default store bound to this validator")
        if not isinstance(source, StoreProtocol) or not callable(source.get):
            logger.error("Object of type %s is not a usable store", type(source).__name__)
            raise ConfigStoreError(f"Store must provide get(key), got {type(source).__name__}")
        return source

    def _run_checks(
        self,
        key: str,
        checks: Tuple[Any, ...],
        value: Any,
        silent: bool,
        errors: List[ConfigValidationError],
    ) -> None:
        for index, spec in enumerate(checks):
            # ConfigResolutionError is never caught here, silent or not.
            check = resolve_check(spec)
            try:
                check(value)
            except ConfigValidationError as exc:
                keyed = exc.with_key(key)
                if silent:
                    logger.debug(
                        "Check %d failed for key=%r claim=%r value=%s",
                        index,
                        key,
                        keyed.claim,
                        _redact_for_log(key, value),
                    )
                    errors.append(keyed)
                    continue
                logger.error(
                    "Validation failed for key=%r claim=%r value=%s",
                    key,
                    keyed.claim,
                    _redact_for_log(key, value),
                )
                if keyed is exc:
                    raise
                raise keyed.with_traceback(exc.__traceback__) from exc.__cause__
            logger.debug("Check %d passed for key=%r", index, key)


def create_validator(store: StoreProtocol) -> Validator:
    """Return a new Validator bound to ``store`` as its default store."""
    return Validator(store)
