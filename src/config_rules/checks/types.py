from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from config_rules.exceptions import ConfigValidationError

__all__ = ["BuiltinType", "as_builtin_type", "parse_array_string", "type_check"]


class BuiltinType(Enum):
    OBJECT = "Object"
    ARRAY = "Array"
    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"

    @property
    def claim(self) -> str:
        return f"must be of type {self.value}"


# Host types accepted as spellings of the markers.
_HOST_TYPES: Dict[type, BuiltinType] = {
    dict: BuiltinType.OBJECT,
    list: BuiltinType.ARRAY,
    str: BuiltinType.STRING,
    float: BuiltinType.NUMBER,
    bool: BuiltinType.BOOLEAN,
}

TRUE_TOKENS = frozenset({"true", "1", "yes"})
FALSE_TOKENS = frozenset({"false", "0", "no"})

_QUOTED = re.compile(r"""\s*(?:"((?:[^"\\]|\\.)*)"|'((?:[^'\\]|\\.)*)')\s*""", re.DOTALL)
_BARE = re.compile(r"""\s*([^,"']*?)\s*(?=,|$)""", re.DOTALL)
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_NUMBER_RE = re.compile(r"^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")


def as_builtin_type(spec: Any) -> Optional[BuiltinType]:
    if isinstance(spec, BuiltinType):
        return spec
    if isinstance(spec, type):
        return _HOST_TYPES.get(spec)
    return None


def parse_array_string(text: str) -> Optional[List[str]]:
    """
    Parse a permissive CSV list, optionally wrapped in brackets.

    Elements are bare text or single/double quoted strings in which a backslash
    escapes the next character. Returns None when ``text`` does not fit the grammar.
    ``'a, "b,c", \\'d\\''`` parses to ``["a", "b,c", "d"]``.
    """
    body = text.strip()
    if body.startswith("[") and body.endswith("]"):
        body = body[1:-1]
    if not body.strip():
        return []

    items: List[str] = []
    pos = 0
    while True:
        quoted = _QUOTED.match(body, pos)
        if quoted is not None:
            raw = quoted.group(1) if quoted.group(1) is not None else quoted.group(2)
            items.append(_ESCAPE.sub(r"\1", raw))
            pos = quoted.end()
        else:
            bare = _BARE.match(body, pos)
            if bare is None:
                return None
            items.append(bare.group(1))
            pos = bare.end()
        if pos == len(body):
            return items
        if body[pos] != ",":
            return None
        pos += 1


def _is_object(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    if isinstance(value, str):
        try:
            return isinstance(json.loads(value), dict)
        except ValueError:
            return False
    return False


def _is_array(value: Any) -> bool:
    if isinstance(value, str):
        return parse_array_string(value) is not None
    return isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray))


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        value = value.strip()
        if not _NUMBER_RE.match(value):
            return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError, OverflowError):
        return False


def _is_boolean(value: Any) -> bool:
    token = str(value).strip().lower()
    return token in TRUE_TOKENS or token in FALSE_TOKENS


_TYPE_PREDICATES: Dict[BuiltinType, Callable[[Any], bool]] = {
    BuiltinType.OBJECT: _is_object,
    BuiltinType.ARRAY: _is_array,
    BuiltinType.STRING: _is_string,
    BuiltinType.NUMBER: _is_number,
    BuiltinType.BOOLEAN: _is_boolean,
}


def type_check(marker: BuiltinType) -> Callable[[Any], None]:
    predicate = _TYPE_PREDICATES[marker]

    def check(value: Any) -> None:
        if not predicate(value):
            raise ConfigValidationError(value, marker.claim)

    check.__name__ = f"type_check_{marker.name.lower()}"
    return check
