from typing import Any

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class StoreProtocol(Protocol):
    """Read side of a configuration store.

    ``get`` returns the current value for a (possibly hierarchical) key, or None
    when absent. It may also return an awaitable, for ``Validator.validate_async``.
    """

    def get(self, key: str) -> Any: ...
