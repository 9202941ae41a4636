from __future__ import annotations

from .formats import ALIASES, FORMAT_CHECKS, FormatCheck
from .protocol import CheckProtocol
from .resolver import PREDICATE_CLAIM, CheckSpec, resolve_check
from .types import BuiltinType, parse_array_string

__all__ = [
    "ALIASES",
    "FORMAT_CHECKS",
    "FormatCheck",
    "CheckProtocol",
    "CheckSpec",
    "PREDICATE_CLAIM",
    "resolve_check",
    "BuiltinType",
    "parse_array_string",
]
