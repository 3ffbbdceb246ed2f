"""Identity snapshots: record, codec, validator and writer."""

from __future__ import annotations

from .errors import (
    DecodeError,
    FormatMismatchError,
    IdentityError,
    InvalidKeyError,
    StoreError,
    ValidationError,
)
from .keys import Key, PublicKey
from .snapshot import Snapshot
from .codec import FORMAT_VERSION, decode_snapshot, encode_snapshot
from .validation import validate_snapshot
from .writer import make_nonce, read_snapshot, write_snapshot

__all__ = [
    "FORMAT_VERSION",
    "DecodeError",
    "FormatMismatchError",
    "IdentityError",
    "InvalidKeyError",
    "Key",
    "PublicKey",
    "Snapshot",
    "StoreError",
    "ValidationError",
    "decode_snapshot",
    "encode_snapshot",
    "make_nonce",
    "read_snapshot",
    "validate_snapshot",
    "write_snapshot",
]
