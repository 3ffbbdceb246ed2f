"""
Field rules for identity snapshots.

:func:`validate_snapshot` is the gate run before anything is persisted, and
can also be used on its own. Rules are checked in a fixed order and the first
violation is raised; violations are never aggregated nor corrected.

1. wall-clock time is set (non-zero)
2. at least one of name / login is non-empty
3. name, login, email are single-line and printable
4. avatar URL is well formed, when present
5. nonce is at most 64 bytes, logical time is not negative
6. every key validates (first failure wins)
"""

from __future__ import annotations

from idledger.core.settings import MAX_NONCE_SIZE

from . import text
from .errors import InvalidKeyError, ValidationError
from .snapshot import Snapshot


def _check_line(field: str, value: str) -> None:
    if not text.is_single_line(value):
        raise ValidationError(f"{field} should be a single line", field=field)
    if not text.is_safe(value):
        raise ValidationError(f"{field} is not fully printable", field=field)


def validate_snapshot(snapshot: Snapshot) -> None:
    """Raise :class:`ValidationError` for the first rule `snapshot` breaks."""
    if snapshot.unix_time == 0:
        raise ValidationError("unix time not set", field="unix_time")

    if text.is_empty(snapshot.name) and text.is_empty(snapshot.login):
        raise ValidationError("either name or login should be set", field="name")

    _check_line("name", snapshot.name)
    _check_line("login", snapshot.login)
    _check_line("email", snapshot.email)

    if snapshot.avatar_url and not text.is_valid_url(snapshot.avatar_url):
        raise ValidationError("avatar_url is not a valid URL", field="avatar_url")

    if len(snapshot.nonce) > MAX_NONCE_SIZE:
        raise ValidationError(
            f"nonce is too big ({len(snapshot.nonce)} > {MAX_NONCE_SIZE} bytes)", field="nonce"
        )

    if snapshot.time < 0:
        raise ValidationError("logical time is negative", field="time")

    for index, key in enumerate(snapshot.keys):
        try:
            key.validate()
        except Exception as exc:
            raise InvalidKeyError(index, exc) from exc


__all__ = ["validate_snapshot"]
