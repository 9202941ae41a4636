"""
config_rules: declarative validation rules for configuration stores.

- Attach check specs (format names, type markers, allowed values, predicates) to keys.
- Run them on demand against any store exposing get(key).
- Fail fast on the first violation, or collect every violation in silent mode.
- Error messages are bounded in size so they are safe to log.
"""

from __future__ import annotations

from config_rules.checks import (
    FORMAT_CHECKS,
    BuiltinType,
    CheckProtocol,
    FormatCheck,
    resolve_check,
)
from config_rules.exceptions import (
    ConfigError,
    ConfigResolutionError,
    ConfigStoreError,
    ConfigValidationError,
)
from config_rules.rules import RuleSet
from config_rules.store import MappingStore, StoreProtocol
from config_rules.validator import Validator, create_validator

__all__ = [
    "Validator",
    "create_validator",
    "RuleSet",
    "resolve_check",
    "BuiltinType",
    "FormatCheck",
    "FORMAT_CHECKS",
    "CheckProtocol",
    "MappingStore",
    "StoreProtocol",
    "ConfigError",
    "ConfigResolutionError",
    "ConfigStoreError",
    "ConfigValidationError",
]
