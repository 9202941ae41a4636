"""
Named format checks.

Each entry of ``FORMAT_CHECKS`` pairs a boolean predicate with the fixed claim
reported when a value fails it. Aliases are bound to the very same
``FormatCheck`` object as their canonical name.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import date, datetime
from ipaddress import IPv4Address, IPv6Address, ip_address
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import urlparse

from config_rules.exceptions import ConfigValidationError

__all__ = ["FormatCheck", "FORMAT_CHECKS", "ALIASES"]


@dataclass(frozen=True)
class FormatCheck:
    name: str
    claim: str
    predicate: Callable[[Any], bool]

    def __call__(self, value: Any) -> None:
        if not self.predicate(value):
            raise ConfigValidationError(value, self.claim)


_INT_RE = re.compile(r"^-?(?:0|[1-9][0-9]*)$")
_FQDN_LABEL_RE = re.compile(r"^(?!-)[a-z0-9\u00a1-\uffff-]{1,63}(?<!-)$", re.IGNORECASE)
_TLD_RE = re.compile(r"^(?:[a-z\u00a1-\uffff]{2,}|xn--[a-z0-9-]{2,})$", re.IGNORECASE)
_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
_UUID_RE = {
    None: re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.I),
    3: re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-3[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}$", re.I),
    4: re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.I),
    5: re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-5[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.I),
}
_DATE_RE = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2})"
    r"(?:[Tt ]([0-9]{2}):([0-9]{2})(?::([0-9]{2})(?:\.[0-9]+)?)?"
    r"(?:[Zz]|[+-]([0-9]{2}):([0-9]{2}))?)?\Z"
)
_URL_SCHEMES = frozenset({"http", "https", "ftp"})


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INT_RE.match(value.strip()):
        return int(value.strip())
    return None


def _int_in_range(value: Any, lo: Optional[int] = None, hi: Optional[int] = None) -> bool:
    number = _as_int(value)
    if number is None:
        return False
    if lo is not None and number < lo:
        return False
    if hi is not None and number > hi:
        return False
    return True


def is_int(value: Any) -> bool:
    return _as_int(value) is not None


def is_nat(value: Any) -> bool:
    return _int_in_range(value, lo=0)


def is_port(value: Any) -> bool:
    return _int_in_range(value, lo=0, hi=65535)


def is_fqdn(value: Any) -> bool:
    """Domain name with at least two labels and an alphabetic TLD."""
    if not isinstance(value, str) or not value or len(value) > 253:
        return False
    name = value[:-1] if value.endswith(".") else value
    labels = name.split(".")
    if len(labels) < 2 or not _TLD_RE.match(labels[-1]):
        return False
    return all(_FQDN_LABEL_RE.match(label) for label in labels)


def is_url(value: Any) -> bool:
    if not isinstance(value, str) or not value or len(value) > 2083:
        return False
    try:
        result = urlparse(value)
        host = result.hostname
        result.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    if result.scheme.lower() not in _URL_SCHEMES or not host:
        return False
    return host == "localhost" or is_ip(host) or is_fqdn(host)


def is_email(value: Any) -> bool:
    if not isinstance(value, str) or not value or len(value) > 254:
        return False
    return bool(_EMAIL_RE.match(value))


def is_ip(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        ip_address(value)
        return True
    except ValueError:
        return False


def is_ipv4(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        IPv4Address(value)
        return True
    except ValueError:
        return False


def is_ipv6(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        IPv6Address(value)
        return True
    except ValueError:
        return False


def _uuid_check(version: Optional[int]) -> Callable[[Any], bool]:
    pattern = _UUID_RE[version]

    def predicate(value: Any) -> bool:
        return isinstance(value, str) and bool(pattern.match(value))

    return predicate


def is_date(value: Any) -> bool:
    """
    Accept date/datetime objects and ISO 8601 strings.

    Strings are ``YYYY-MM-DD`` optionally followed by ``T`` or a space, ``HH:MM``,
    optional ``:SS`` with fraction, and an optional ``Z`` or ``+HH:MM`` offset.
    """
    if isinstance(value, (date, datetime)):
        return True
    if not isinstance(value, str):
        return False
    match = _DATE_RE.match(value.strip())
    if match is None:
        return False
    year, month, day, hour, minute, second, offset_h, offset_m = (
        int(part) if part is not None else 0 for part in match.groups()
    )
    if offset_h > 23 or offset_m > 59:
        return False
    try:
        datetime(year, month, day, hour, minute, second)
        return True
    except ValueError:
        return False


def _isbn10(digits: str) -> bool:
    if not re.match(r"^[0-9]{9}[0-9X]$", digits):
        return False
    total = 0
    for i, ch in enumerate(digits):
        total += (10 if ch == "X" else int(ch)) * (10 - i)
    return total % 11 == 0


def _isbn13(digits: str) -> bool:
    if not re.match(r"^[0-9]{13}$", digits):
        return False
    total = sum(int(ch) * (1 if i % 2 == 0 else 3) for i, ch in enumerate(digits))
    return total % 10 == 0


def is_isbn(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    digits = re.sub(r"[\s-]", "", value).upper()
    return _isbn10(digits) or _isbn13(digits)


def is_json(value: Any) -> bool:
    """A string holding a JSON object or array."""
    if not isinstance(value, str):
        return False
    try:
        return isinstance(json.loads(value), (dict, list))
    except ValueError:
        return False


def _anything(value: Any) -> bool:
    return True


_CANONICAL: Dict[str, FormatCheck] = {
    check.name: check
    for check in (
        FormatCheck("*", "may be any value", _anything),
        FormatCheck("int", "must be an integer", is_int),
        FormatCheck("nat", "must be a positive integer", is_nat),
        FormatCheck("port", "must be within range 0 - 65535", is_port),
        FormatCheck("fqdn", "must be a domain name", is_fqdn),
        FormatCheck("url", "must be a URL", is_url),
        FormatCheck("email", "must be an email address", is_email),
        FormatCheck("ip", "must be an IP address", is_ip),
        FormatCheck("ipv4", "must be an IPv4 address", is_ipv4),
        FormatCheck("ipv6", "must be an IPv6 address", is_ipv6),
        FormatCheck("uuid", "must be a UUID", _uuid_check(None)),
        FormatCheck("uuid3", "must be a version 3 UUID", _uuid_check(3)),
        FormatCheck("uuid4", "must be a version 4 UUID", _uuid_check(4)),
        FormatCheck("uuid5", "must be a version 5 UUID", _uuid_check(5)),
        FormatCheck("duration", "must be a positive integer", is_nat),
        FormatCheck("timestamp", "must be a positive integer", is_nat),
        FormatCheck("date", "must be a date", is_date),
        FormatCheck("isbn", "must be a book number", is_isbn),
        FormatCheck("json", "must be a JSON string", is_json),
    )
}

ALIASES: Mapping[str, str] = MappingProxyType(
    {"domain": "fqdn", "ipaddress": "ip", "integer": "int"}
)

FORMAT_CHECKS: Mapping[str, FormatCheck] = MappingProxyType(
    {**_CANONICAL, **{alias: _CANONICAL[target] for alias, target in ALIASES.items()}}
)
