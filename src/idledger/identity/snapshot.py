"""
Identity snapshot record.

A :class:`Snapshot` captures an identity's attributes at one point of its
history: display name, contact email, login, avatar URL, the set of keys
valid from that point on, an optional nonce, and free-form metadata.

Lifecycle
---------
The record is freely mutable until it is handed to
:func:`idledger.identity.writer.write_snapshot`. A successful write records
the returned content hash in :attr:`Snapshot.content_hash`; from then on the
snapshot is identified by that hash. Metadata set afterwards stays local to
this in-memory instance: the stored bytes are content-addressed and never
change.

Concurrency
-----------
A snapshot is single-writer. Callers that share one between threads must
serialize access themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .keys import PublicKey


@dataclass(slots=True, eq=False)
class Snapshot:
    """
    Point-in-time view of an identity.

    Attributes
    ----------
    time : int
        Logical (Lamport) clock value at which this snapshot becomes effective.
        Stamped by the history assembler.
    unix_time : int
        Wall-clock time in Unix seconds. ``0`` means "unset".
    name, email, login : str
        Display name, contact email and login handle. At least one of
        ``name``/``login`` must be non-empty.
    avatar_url : str
        Empty, or an absolute URL.
    keys : list[PublicKey]
        Keys valid from this snapshot onward.
    nonce : bytes
        Extra entropy (at most 64 bytes) so that otherwise identical
        snapshots of distinct identities hash differently.
    metadata : dict[str, str] | None
        Arbitrary annotations, allocated on first use.
    """

    time: int = 0
    unix_time: int = 0
    name: str = ""
    email: str = ""
    login: str = ""
    avatar_url: str = ""
    keys: list[PublicKey] = field(default_factory=list)
    nonce: bytes = b""
    metadata: dict[str, str] | None = None

    # Set by the writer; never serialized.
    content_hash: str | None = None

    def __eq__(self, other: object) -> bool:
        """Compare the serialized fields; empty and absent metadata are equal."""
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._wire_fields() == other._wire_fields()

    def _wire_fields(self) -> tuple[object, ...]:
        return (
            self.time,
            self.unix_time,
            self.name,
            self.email,
            self.login,
            self.avatar_url,
            list(self.keys),
            bytes(self.nonce),
            self.metadata or None,
        )

    # ------------------------------- Metadata -------------------------------

    def set_metadata(self, key: str, value: str) -> None:
        """
        Store an arbitrary annotation, overwriting any previous value.

        If this snapshot has already been written, the stored bytes are not
        updated: the value only affects later writes and in-memory readers.
        """
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value

    def get_metadata(self, key: str) -> str | None:
        """Return the annotation stored under `key`, or ``None`` if absent."""
        if self.metadata is None:
            return None
        return self.metadata.get(key)

    def all_metadata(self) -> dict[str, str]:
        """
        Return the live metadata mapping (not a copy).

        Mutating the returned dict mutates the snapshot, and later calls to
        :meth:`set_metadata` are visible through it.
        """
        if self.metadata is None:
            self.metadata = {}
        return self.metadata

    # ------------------------------- Helpers --------------------------------

    @property
    def is_written(self) -> bool:
        """True once a write has recorded a content hash."""
        return self.content_hash is not None

    def clone(self) -> Snapshot:
        """
        Return an unwritten, independent copy of this snapshot.

        Used to derive the next snapshot of a history: the copy shares no
        mutable container with the original and carries no content hash.
        """
        return Snapshot(
            time=self.time,
            unix_time=self.unix_time,
            name=self.name,
            email=self.email,
            login=self.login,
            avatar_url=self.avatar_url,
            keys=list(self.keys),
            nonce=bytes(self.nonce),
            metadata=dict(self.metadata) if self.metadata is not None else None,
        )


__all__ = ["Snapshot"]
