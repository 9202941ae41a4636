from __future__ import annotations

from typing import Any, Optional

from config_rules.utils import _display_budget, _display_value


class ConfigError(Exception):
    """Base config exception."""


class ConfigResolutionError(ConfigError):
    """Raised when a check spec cannot be turned into a check.

    This is a programming mistake (unknown format name, malformed spec), never a
    bad configuration value, so silent validation does not collect it.
    """


class ConfigStoreError(ConfigError):
    """Raised when validation has no usable store to read values from."""


class ConfigValidationError(ConfigError):
    """Raised when a value fails a check.

    ``key`` is unset when a check raises the error; the validator fills it in
    through ``with_key``, which returns a new error instead of mutating this one.
    """

    DISPLAY_BUDGET = _display_budget()

    def __init__(self, value: Any, claim: str, key: Optional[str] = None) -> None:
        super().__init__(value, claim, key)
        self._value = value
        self._claim = claim
        self._key = key
        self._message: Optional[str] = None

    @property
    def value(self) -> Any:
        return self._value

    @property
    def claim(self) -> str:
        return self._claim

    @property
    def key(self) -> Optional[str]:
        return self._key

    @property
    def message(self) -> str:
        if self._message is None:
            shown = _display_value(self._value, self.DISPLAY_BUDGET)
            msg = f"{self._claim}; got {shown}"
            if self._key is not None:
                msg = f"{self._key}: {msg}"
            self._message = msg
        return self._message

    def with_key(self, key: str) -> "ConfigValidationError":
        if self._key is not None:
            return self
        keyed = type(self).__new__(type(self))
        ConfigValidationError.__init__(keyed, self._value, self._claim, key)
        keyed.__cause__ = self.__cause__
        return keyed

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, claim={self._claim!r})"
