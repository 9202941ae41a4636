from .adaptors import StoreProtocol
from .mapping import MappingStore

__all__ = ["StoreProtocol", "MappingStore"]
