"""Content-addressed stores for snapshot payloads."""

from __future__ import annotations

from .base import ContentStore, hash_blob, is_valid_hash
from .disk import FileStore
from .memory import MemoryStore

__all__ = ["ContentStore", "FileStore", "MemoryStore", "hash_blob", "is_valid_hash"]
