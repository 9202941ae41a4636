from typing import Any

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class CheckProtocol(Protocol):
    def __call__(self, value: Any) -> None:  # raise ConfigValidationError on failure
        ...
