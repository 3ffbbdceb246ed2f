"""
Validation-gated persistence of identity snapshots.

:func:`write_snapshot` is the only path by which a snapshot becomes content
addressed: it validates, encodes, hands the bytes to a content store and
records the returned hash. An invalid snapshot never reaches the store.

:func:`make_nonce` supplies random padding for snapshots that would
otherwise lack entropy (e.g. a fresh identity without keys).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from idledger.core.settings import get_logger, load_settings

from .codec import decode_snapshot, encode_snapshot
from .errors import ValidationError
from .snapshot import Snapshot
from .validation import validate_snapshot

if TYPE_CHECKING:
    from idledger.store.base import ContentStore

log = get_logger(__name__)

# sysexits.h EX_OSERR
_EXIT_NO_ENTROPY = 71


def write_snapshot(snapshot: Snapshot, store: ContentStore) -> str:
    """
    Validate, encode and store `snapshot`; return its content hash.

    On success the hash is also recorded in ``snapshot.content_hash``.

    Raises
    ------
    ValidationError
        ``"validation error: ..."`` chained to the rule that failed. The
        store is not called.
    Exception
        Whatever the store raises, unchanged. Nothing is assumed stored.
    """
    try:
        validate_snapshot(snapshot)
    except ValidationError as exc:
        raise ValidationError(f"validation error: {exc}", field=exc.field) from exc

    data = encode_snapshot(snapshot)
    content_hash = store.store_data(data)

    snapshot.content_hash = content_hash
    log.debug("snapshot at time %d written as %s", snapshot.time, content_hash)
    return content_hash


def read_snapshot(store: ContentStore, content_hash: str) -> Snapshot:
    """
    Load the snapshot stored under `content_hash`.

    The payload is decoded but not validated, so old data that no longer
    satisfies the field rules can still be inspected.
    """
    data = store.read_data(content_hash)
    snapshot = decode_snapshot(data)
    snapshot.content_hash = content_hash
    return snapshot


def make_nonce(length: int | None = None) -> bytes:
    """
    Return `length` cryptographically random bytes.

    Defaults to the ``IDLEDGER_NONCE_SIZE`` setting. A missing entropy source
    means the environment is broken, not the data: the process exits with
    status 71 instead of raising a recoverable error.
    """
    if length is None:
        length = load_settings().nonce_size
    if length < 0:
        raise ValueError(f"nonce length must be non-negative, got {length}")
    try:
        return os.urandom(length)
    except (NotImplementedError, OSError) as exc:
        log.critical("no randomness source available: %s", exc)
        raise SystemExit(_EXIT_NO_ENTROPY) from exc


__all__ = ["write_snapshot", "read_snapshot", "make_nonce"]
