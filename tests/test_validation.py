"""Unit tests for the snapshot validation gate."""

from __future__ import annotations

import pytest

from idledger.identity.errors import InvalidKeyError, ValidationError
from idledger.identity.keys import PublicKey
from idledger.identity.snapshot import Snapshot
from idledger.identity.validation import validate_snapshot

FPR = "0123456789abcdef0123456789abcdef01234567"


def _valid(**overrides: object) -> Snapshot:
    snap = Snapshot(unix_time=1700000000, name="Alice")
    for k, v in overrides.items():
        setattr(snap, k, v)
    return snap


class _BrokenKey:
    def __init__(self, reason: str) -> None:
        self.reason = reason

    def validate(self) -> None:
        raise RuntimeError(self.reason)


def test_minimal_snapshot_is_valid() -> None:
    validate_snapshot(_valid())


def test_unset_time_is_rejected_first() -> None:
    """Rule order: unset time wins over the missing name/login."""
    with pytest.raises(ValidationError, match="unix time not set") as info:
        validate_snapshot(Snapshot())
    assert info.value.field == "unix_time"


def test_negative_unix_time_is_allowed() -> None:
    validate_snapshot(_valid(unix_time=-86400))


@pytest.mark.parametrize(("name", "login"), [("", ""), ("  ", ""), ("", "\t")])
def test_name_or_login_required(name: str, login: str) -> None:
    with pytest.raises(ValidationError, match="either name or login should be set"):
        validate_snapshot(_valid(name=name, login=login))


@pytest.mark.parametrize(("name", "login"), [("Alice", ""), ("", "alice"), ("Alice", "alice")])
def test_either_name_or_login_suffices(name: str, login: str) -> None:
    validate_snapshot(_valid(name=name, login=login))


@pytest.mark.parametrize("field", ["name", "login", "email"])
def test_multi_line_text_is_rejected(field: str) -> None:
    snap = _valid(login="alice")
    setattr(snap, field, "first\nsecond")
    with pytest.raises(ValidationError, match=f"{field} should be a single line") as info:
        validate_snapshot(snap)
    assert info.value.field == field

    setattr(snap, field, "firstsecond")
    validate_snapshot(snap)


@pytest.mark.parametrize("field", ["name", "login", "email"])
def test_unprintable_text_is_rejected(field: str) -> None:
    snap = _valid(login="alice")
    setattr(snap, field, "bell\x07")
    with pytest.raises(ValidationError, match=f"{field} is not fully printable"):
        validate_snapshot(snap)

    setattr(snap, field, "bell")
    validate_snapshot(snap)


def test_email_may_be_empty() -> None:
    validate_snapshot(_valid(email=""))


def test_avatar_url_checked_only_when_present() -> None:
    validate_snapshot(_valid(avatar_url=""))
    validate_snapshot(_valid(avatar_url="https://example.com/a.png"))
    with pytest.raises(ValidationError, match="avatar_url is not a valid URL") as info:
        validate_snapshot(_valid(avatar_url="avatar.png"))
    assert info.value.field == "avatar_url"


def test_nonce_bound() -> None:
    """64 bytes pass, 65 bytes fail."""
    validate_snapshot(_valid(nonce=b"\x00" * 64))
    with pytest.raises(ValidationError, match="nonce is too big") as info:
        validate_snapshot(_valid(nonce=b"\x00" * 65))
    assert info.value.field == "nonce"


def test_valid_keys_pass() -> None:
    validate_snapshot(_valid(keys=[PublicKey(fingerprint=FPR, pub_key="armored")]))


def test_invalid_key_is_wrapped() -> None:
    good = PublicKey(fingerprint=FPR, pub_key="armored")
    bad = PublicKey(fingerprint="", pub_key="armored")
    with pytest.raises(InvalidKeyError, match="invalid key: fingerprint is empty") as info:
        validate_snapshot(_valid(keys=[good, bad]))
    assert info.value.index == 1
    assert info.value.field == "pub_keys"
    assert isinstance(info.value.__cause__, ValueError)


def test_first_failing_key_short_circuits() -> None:
    """Any object with `validate()` is accepted; the first failure is reported."""
    snap = _valid(keys=[_BrokenKey("revoked"), _BrokenKey("expired")])
    with pytest.raises(InvalidKeyError, match="revoked") as info:
        validate_snapshot(snap)
    assert info.value.index == 0
    assert isinstance(info.value.__cause__, RuntimeError)


def test_validation_has_no_side_effects() -> None:
    snap = _valid(nonce=b"\x01" * 65)
    with pytest.raises(ValidationError):
        validate_snapshot(snap)
    assert snap.content_hash is None
    assert snap.metadata is None
    assert snap.nonce == b"\x01" * 65


def test_negative_logical_time_is_rejected() -> None:
    """A negative clock value could be stored but never decoded again."""
    validate_snapshot(_valid(time=0))
    with pytest.raises(ValidationError, match="logical time is negative") as info:
        validate_snapshot(_valid(time=-1))
    assert info.value.field == "time"


@pytest.mark.parametrize("name", ["Al\u2028ice", "Al\u2029ice"])
def test_unicode_line_separators_are_rejected(name: str) -> None:
    with pytest.raises(ValidationError, match="name should be a single line"):
        validate_snapshot(_valid(name=name))


def test_bidi_override_is_rejected() -> None:
    with pytest.raises(ValidationError, match="name is not fully printable"):
        validate_snapshot(_valid(name="\u202eecilA"))


def test_invisible_name_counts_as_empty() -> None:
    with pytest.raises(ValidationError, match="either name or login should be set"):
        validate_snapshot(_valid(name="\u200b"))
    validate_snapshot(_valid(name="\u200b", login="alice"))
