"""Content-addressed store contract and hashing.

Content hashes are git blob object ids: ``sha1(b"blob <len>\\0" + data)`` as
40 lowercase hex characters, so an object id produced here matches what
``git hash-object`` prints for the same bytes.
"""

from __future__ import annotations

import hashlib
import re
from typing import Protocol, runtime_checkable

_HASH_RE = re.compile(r"^[0-9a-f]{40}$")


def hash_blob(data: bytes) -> str:
    """Return the content hash of `data`."""
    header = b"blob %d\x00" % len(data)
    return hashlib.sha1(header + data).hexdigest()


def is_valid_hash(value: str) -> bool:
    return bool(_HASH_RE.match(value))


@runtime_checkable
class ContentStore(Protocol):
    """
    An append-only, content-addressed byte store.

    Implementations must return the same hash for the same bytes and must
    never alter an object once stored. Failures are raised to the caller
    unchanged; no retry policy is implied.
    """

    def store_data(self, data: bytes) -> str: ...

    def read_data(self, content_hash: str) -> bytes: ...


__all__ = ["ContentStore", "hash_blob", "is_valid_hash"]
