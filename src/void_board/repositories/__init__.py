"""Storage interfaces and their SQL and in-memory implementations."""

from .base import ContentStore, IdentityStore
from .memory import MemoryContentStore, MemoryIdentityStore
from .sql import SqlContentStore, SqlIdentityStore

__all__ = [
    "ContentStore",
    "IdentityStore",
    "MemoryContentStore",
    "MemoryIdentityStore",
    "SqlContentStore",
    "SqlIdentityStore",
]
