"""Public keys attached to an identity snapshot.

A snapshot only relies on the :class:`Key` capability: something that can
check itself and raise when it is unusable. :class:`PublicKey` is the
concrete record carried on the wire under ``pub_keys``.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

_HEX_DIGITS = frozenset(string.hexdigits)


@runtime_checkable
class Key(Protocol):
    """Anything that can validate itself, raising on failure."""

    def validate(self) -> None: ...


@dataclass(frozen=True, slots=True)
class PublicKey:
    """
    An armored public key and its fingerprint.

    Attributes
    ----------
    fingerprint : str
        Hexadecimal fingerprint of the key (e.g. an OpenPGP v4 fingerprint).
    pub_key : str
        Armored public key material. Never interpreted here.
    """

    fingerprint: str
    pub_key: str

    def validate(self) -> None:
        """Raise ``ValueError`` if the key record is unusable."""
        if not self.fingerprint:
            raise ValueError("fingerprint is empty")
        if not set(self.fingerprint) <= _HEX_DIGITS:
            raise ValueError(f"fingerprint {self.fingerprint!r} is not hexadecimal")
        if not self.pub_key.strip():
            raise ValueError("public key is empty")


__all__ = ["Key", "PublicKey"]
