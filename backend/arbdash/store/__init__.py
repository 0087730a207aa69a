from .base import Store
from .memory import MemoryStore, Table, IdAllocator
from .seed import seed_store

__all__ = [
    "Store",
    "MemoryStore",
    "Table",
    "IdAllocator",
    "seed_store",
]
