"""Disk-backed content store.

Objects are laid out like a loose git object directory:

- Default root: ``IDLEDGER_STORE_DIR`` setting (``.idledger/objects``)
- Object path : ``<root>/<hash[:2]>/<hash[2:]>``
- Content     : the raw bytes handed to ``store_data`` (no compression)

Objects are written once and never rewritten; storing bytes that are
already present is a no-op returning the same hash.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from idledger.core.settings import get_logger, load_settings
from idledger.identity.errors import StoreError

from .base import hash_blob, is_valid_hash

log = get_logger(__name__)


class FileStore:
    """Persist content-addressed objects under a directory tree."""

    def __init__(self, root: Path | None = None) -> None:
        self.root: Path = root if root is not None else load_settings().store_dir
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, content_hash: str) -> Path:
        return self.root / content_hash[:2] / content_hash[2:]

    def store_data(self, data: bytes) -> str:
        """Write `data` if absent and return its content hash.

        Notes
        -----
        Bytes are first written to a temporary file in the fan-out directory
        and then renamed into place, so a reader never sees a partial object.
        """
        content_hash = hash_blob(data)
        path = self._path(content_hash)
        if path.exists():
            return content_hash

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StoreError(f"could not store object {content_hash}: {exc}") from exc

        log.debug("wrote %d bytes to %s", len(data), path)
        return content_hash

    def read_data(self, content_hash: str) -> bytes:
        if not is_valid_hash(content_hash):
            raise StoreError(f"{content_hash!r} is not a content hash")
        path = self._path(content_hash)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise StoreError(f"object {content_hash} not found") from None
        except OSError as exc:
            raise StoreError(f"could not read object {content_hash}: {exc}") from exc

    def __contains__(self, content_hash: object) -> bool:
        return (
            isinstance(content_hash, str)
            and is_valid_hash(content_hash)
            and self._path(content_hash).exists()
        )


__all__ = ["FileStore"]
