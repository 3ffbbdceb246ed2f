"""
In-memory content store.

A dictionary keyed by content hash. Volatile: everything is lost with the
process. Used by tests and by callers that only need hashes.
"""

from __future__ import annotations

from idledger.core.settings import get_logger
from idledger.identity.errors import StoreError

from .base import hash_blob

log = get_logger(__name__)


class MemoryStore:
    """
    Dictionary-backed :class:`~idledger.store.base.ContentStore`.

    Attributes
    ----------
    writes : int
        Number of ``store_data`` calls served, including duplicates.
    """

    def __init__(self) -> None:
        self._objects: dict[str, bytes] = {}
        self.writes: int = 0

    def store_data(self, data: bytes) -> str:
        content_hash = hash_blob(data)
        self.writes += 1
        if content_hash not in self._objects:
            self._objects[content_hash] = bytes(data)
            log.debug("stored %d bytes as %s", len(data), content_hash)
        return content_hash

    def read_data(self, content_hash: str) -> bytes:
        try:
            return self._objects[content_hash]
        except KeyError:
            raise StoreError(f"object {content_hash} not found") from None

    def __contains__(self, content_hash: object) -> bool:
        return content_hash in self._objects

    def __len__(self) -> int:
        return len(self._objects)


__all__ = ["MemoryStore"]
