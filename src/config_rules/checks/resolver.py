from __future__ import annotations

import logging
from typing import Any, Callable, Union

from config_rules.exceptions import ConfigResolutionError, ConfigValidationError

from .formats import FORMAT_CHECKS, FormatCheck
from .protocol import CheckProtocol
from .types import BuiltinType, as_builtin_type, type_check

logger = logging.getLogger("config_rules.checks")
logger.addHandler(logging.NullHandler())

__all__ = ["CheckSpec", "PREDICATE_CLAIM", "resolve_check"]

CheckSpec = Union[str, BuiltinType, type, list, tuple, set, frozenset, Callable[[Any], Any]]

PREDICATE_CLAIM = "must be a valid value"
ENUMERATION_CLAIM = "must be one of the possible values: "


def resolve_check(spec: Any) -> CheckProtocol:
    """
    Map a check spec to a callable that raises ConfigValidationError on failure.

    Dispatch order: builtin type marker, format name, allowed-value collection,
    predicate. Anything else raises ConfigResolutionError.
    """
    marker = as_builtin_type(spec)
    if marker is not None:
        logger.debug("Resolved %r -> type check %s", spec, marker.name)
        return type_check(marker)

    if isinstance(spec, str):
        try:
            check = FORMAT_CHECKS[spec]
        except KeyError:
            logger.error("Unknown check name %r", spec)
            raise ConfigResolutionError(f"unknown check: {spec}") from None
        logger.debug("Resolved %r -> format check %r", spec, check.name)
        return check

    if isinstance(spec, (list, tuple, set, frozenset)):
        logger.debug("Resolved %d allowed values -> membership check", len(spec))
        return _membership_check(spec)

    if isinstance(spec, FormatCheck):
        return spec

    if callable(spec):
        logger.debug("Resolved %r -> predicate check", spec)
        return _predicate_check(spec)

    logger.error("Unusable check spec %r (%s)", spec, type(spec).__name__)
    raise ConfigResolutionError("`check` must be a function or a known check string.")


def _membership_check(options: Any) -> CheckProtocol:
    if isinstance(options, (set, frozenset)):
        allowed = tuple(sorted(options, key=str))
    else:
        allowed = tuple(options)
    claim = ENUMERATION_CLAIM + ",".join(str(option) for option in allowed)

    def check(value: Any) -> None:
        if not any(value == option for option in allowed):
            raise ConfigValidationError(value, claim)

    return check


def _predicate_check(predicate: Callable[[Any], Any]) -> CheckProtocol:
    def check(value: Any) -> None:
        try:
            ok = predicate(value)
        except (ConfigValidationError, ConfigResolutionError):
            raise
        except Exception as exc:
            logger.debug("Predicate %r raised %r", predicate, exc)
            raise ConfigValidationError(value, PREDICATE_CLAIM) from exc
        if not ok:
            raise ConfigValidationError(value, PREDICATE_CLAIM)

    return check
