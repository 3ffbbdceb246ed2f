"""
Wire codec for identity snapshots.

A snapshot is encoded as one JSON object tagged with an explicit format
version:

    {
      "version": 1, "time": <uint>, "unix_time": <int>,
      "name": <str>, "email": <str>, "login": <str>, "avatar_url": <str>,
      "pub_keys": [{"fingerprint": <str>, "pub_key": <str>}, ...],
      "nonce": <base64, omitted if empty>,
      "metadata": {<str>: <str>, ...} (omitted if empty)
    }

Determinism
-----------
Encodings feed content hashing, so the same unchanged snapshot must always
produce the same bytes. Keys are sorted, separators are compact and output
is ASCII-only; metadata insertion order therefore never leaks into the hash.

Versioning
----------
Only :data:`FORMAT_VERSION` is readable. Any other value fails with
:class:`~idledger.identity.errors.FormatMismatchError`; there is no migration
path, so a format change must be handled explicitly.

Decoding never applies the snapshot field rules: historical data that would
no longer validate can still be read and inspected.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from .errors import DecodeError, FormatMismatchError
from .keys import PublicKey
from .snapshot import Snapshot

FORMAT_VERSION = 1


class KeyPayload(BaseModel):
    """Wire shape of one entry of ``pub_keys``."""

    model_config = ConfigDict(extra="ignore")

    fingerprint: StrictStr = ""
    pub_key: StrictStr = ""


class SnapshotPayload(BaseModel):
    """Wire shape of a snapshot, including the format version tag.

    Scalars are strict: a field is copied as found, never coerced (``"5"`` or
    ``true`` is not a clock value), so re-encoding reproduces the stored bytes.
    """

    model_config = ConfigDict(extra="ignore")

    version: StrictInt
    time: StrictInt = Field(default=0, ge=0, description="Logical clock value")
    unix_time: StrictInt = 0
    name: StrictStr = ""
    email: StrictStr = ""
    login: StrictStr = ""
    avatar_url: StrictStr = ""
    pub_keys: list[KeyPayload] = Field(default_factory=list)
    nonce: bytes = b""
    metadata: dict[StrictStr, StrictStr] | None = None

    @field_validator("pub_keys", mode="before")
    @classmethod
    def _null_keys(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("nonce", mode="before")
    @classmethod
    def _decode_nonce(cls, v: Any) -> Any:
        """Accept raw bytes, or standard base64 text as found on the wire."""
        if v is None:
            return b""
        if isinstance(v, str):
            try:
                return base64.b64decode(v, validate=True)
            except binascii.Error as exc:
                raise ValueError(f"nonce is not valid base64: {exc}") from exc
        return v

    @field_serializer("nonce")
    def _encode_nonce(self, v: bytes) -> str:
        return base64.b64encode(v).decode("ascii")


def _to_payload(snapshot: Snapshot) -> SnapshotPayload:
    return SnapshotPayload.model_construct(
        version=FORMAT_VERSION,
        time=snapshot.time,
        unix_time=snapshot.unix_time,
        name=snapshot.name,
        email=snapshot.email,
        login=snapshot.login,
        avatar_url=snapshot.avatar_url,
        pub_keys=[KeyPayload(fingerprint=k.fingerprint, pub_key=k.pub_key) for k in snapshot.keys],
        nonce=snapshot.nonce,
        metadata=snapshot.metadata,
    )


def _from_payload(payload: SnapshotPayload) -> Snapshot:
    return Snapshot(
        time=payload.time,
        unix_time=payload.unix_time,
        name=payload.name,
        email=payload.email,
        login=payload.login,
        avatar_url=payload.avatar_url,
        keys=[PublicKey(fingerprint=k.fingerprint, pub_key=k.pub_key) for k in payload.pub_keys],
        nonce=payload.nonce,
        metadata=payload.metadata,
    )


def encode_snapshot(snapshot: Snapshot) -> bytes:
    """
    Serialize `snapshot` to its canonical wire bytes.

    ``nonce`` and ``metadata`` are omitted when empty. The content hash is
    never part of the output. No validation is performed here.
    """
    doc: dict[str, Any] = _to_payload(snapshot).model_dump(mode="json")
    if not snapshot.nonce:
        doc.pop("nonce")
    if not snapshot.metadata:
        doc.pop("metadata")
    return json.dumps(doc, sort_keys=True, separators=(",", ":")).encode("ascii")


def decode_snapshot(data: bytes | str) -> Snapshot:
    """
    Parse wire bytes into a new, unwritten :class:`Snapshot`.

    Raises
    ------
    FormatMismatchError
        If the ``version`` tag is missing or differs from :data:`FORMAT_VERSION`.
    DecodeError
        If the payload is not a JSON object of the expected shape.
    """
    try:
        doc = json.loads(data)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"snapshot payload is not valid JSON: {exc}") from exc
    if not isinstance(doc, dict):
        raise DecodeError(f"snapshot payload must be a JSON object, got {type(doc).__name__}")

    # bool is an int subclass; `true` is not version 1.
    version = doc.get("version")
    if type(version) is not int or version != FORMAT_VERSION:
        raise FormatMismatchError(version)

    try:
        payload = SnapshotPayload.model_validate(doc)
    except PydanticValidationError as exc:
        raise DecodeError(f"malformed snapshot payload: {exc}") from exc
    return _from_payload(payload)


__all__ = [
    "FORMAT_VERSION",
    "KeyPayload",
    "SnapshotPayload",
    "encode_snapshot",
    "decode_snapshot",
]
