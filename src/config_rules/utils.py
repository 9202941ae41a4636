from __future__ import annotations

import os
from typing import Any

__all__ = [
    "DEFAULT_DISPLAY_BUDGET",
    "_display_budget",
    "_display_value",
    "_truncate",
    "_redact_for_log",
]

DEFAULT_DISPLAY_BUDGET = 80

# Budgets below this cannot fit a prefix, the ellipsis and a suffix.
_MIN_DISPLAY_BUDGET = 16

_SENSITIVE_MARKERS = ("secret", "password", "token", "passwd", "api_key")


def _display_budget() -> int:
    raw = os.getenv("CONFIG_RULES_DISPLAY_BUDGET", "")
    try:
        budget = int(raw)
    except ValueError:
        return DEFAULT_DISPLAY_BUDGET
    return max(budget, _MIN_DISPLAY_BUDGET)


def _truncate(text: str, budget: int) -> str:
    """Shorten ``text`` to at most ``budget`` characters, keeping both ends."""
    if len(text) <= budget:
        return text
    keep = budget - 3
    head = (keep + 1) // 2
    tail = keep - head
    return text[:head] + "..." + text[len(text) - tail :]


def _display_value(value: Any, budget: int = DEFAULT_DISPLAY_BUDGET) -> str:
    if isinstance(value, str):
        text = value
    else:
        try:
            text = repr(value)
        except Exception:
            text = f"<unreprable {type(value).__name__}>"
    return _truncate(text, budget)


def _redact_for_log(key: Any, value: Any) -> str:
    """
    Redact likely secrets in logs.
    """
    lowered = str(key).lower()
    if any(s in lowered for s in _SENSITIVE_MARKERS):
        return "***"
    return _display_value(value)
