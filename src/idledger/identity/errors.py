"""Exception hierarchy for identity snapshots.

All errors derived from :class:`IdentityError` are recoverable by the caller
(fix the data, or retry the store). A broken randomness source is *not*
part of this hierarchy: see :func:`idledger.identity.writer.make_nonce`.
"""

from __future__ import annotations


class IdentityError(Exception):
    """Base class for every error raised by the identity package."""


class ValidationError(IdentityError):
    """A snapshot broke one of its field rules.

    Attributes
    ----------
    field : str | None
        Wire name of the offending field (e.g. ``"name"``, ``"pub_keys"``).
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidKeyError(ValidationError):
    """One element of ``keys`` failed its own validation.

    The key's error is chained as ``__cause__``.
    """

    def __init__(self, index: int, cause: Exception) -> None:
        super().__init__(f"invalid key: {cause}", field="pub_keys")
        self.index = index
        self.__cause__ = cause


class FormatMismatchError(IdentityError):
    """The payload carries a format version this code does not read."""

    def __init__(self, found: object) -> None:
        super().__init__(f"unknown format version {found!r}")
        self.found = found


class DecodeError(IdentityError):
    """The payload is not a well-formed snapshot document."""


class StoreError(IdentityError):
    """Raised by the bundled content stores."""


__all__ = [
    "IdentityError",
    "ValidationError",
    "InvalidKeyError",
    "FormatMismatchError",
    "DecodeError",
    "StoreError",
]
