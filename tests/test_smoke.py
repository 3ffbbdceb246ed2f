"""
Smoke tests for package structure and availability.

Scope
-----
These tests strictly verify that the package is installed correctly in the
environment and that top-level modules are importable.
"""

from __future__ import annotations

import importlib

from idledger import __version__


def test_package_importable() -> None:
    """Ensure the top-level package can be imported."""
    for name in ("idledger", "idledger.identity", "idledger.store"):
        assert importlib.import_module(name) is not None


def test_version_is_set() -> None:
    """Ensure the package exposes a valid version string."""
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_identity_package_reexports_operations() -> None:
    """The snapshot operations are reachable from `idledger.identity`."""
    identity = importlib.import_module("idledger.identity")
    for name in (
        "Snapshot",
        "validate_snapshot",
        "encode_snapshot",
        "decode_snapshot",
        "write_snapshot",
        "read_snapshot",
        "make_nonce",
    ):
        assert hasattr(identity, name), f"idledger.identity must expose {name}"
