# scripts/smoke.py
"""
Smoke Test Script for idledger.

Writes one identity snapshot into an on-disk object store, reads it back and
prints what was stored.

Usage
-----
1. Use the configured store (IDLEDGER_STORE_DIR, default `.idledger/objects`):
    $ python scripts/smoke.py

2. Use an explicit store directory and name:
    $ python scripts/smoke.py --store /tmp/objects --name "Alice"
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from idledger.identity import Snapshot, make_nonce, read_snapshot, write_snapshot
from idledger.identity.errors import IdentityError
from idledger.store import FileStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


def main() -> int:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run idledger Smoke Test")
    parser.add_argument("--store", "-s", type=str, help="Object store directory")
    parser.add_argument("--name", "-n", type=str, default="Smoke Tester", help="Display name")
    parser.add_argument("--login", "-l", type=str, default="", help="Login handle")
    args = parser.parse_args()

    store = FileStore(Path(args.store) if args.store else None)
    print(f"\n📂 Object store: {store.root}")

    # No keys on a fresh identity, so pad with a nonce.
    snap = Snapshot(
        time=1,
        unix_time=int(time.time()),
        name=args.name,
        login=args.login,
        nonce=make_nonce(),
    )
    snap.set_metadata("created-by", "scripts/smoke.py")

    try:
        content_hash = write_snapshot(snap, store)
        loaded = read_snapshot(store, content_hash)
    except IdentityError as exc:
        print(f"\n❌ Smoke test failed: {exc}")
        return 1

    print("\n" + "=" * 60)
    print("✅ Snapshot written and read back")
    print("=" * 60)
    print(f"  hash      : {content_hash}")
    print(f"  name      : {loaded.name!r}")
    print(f"  login     : {loaded.login!r}")
    print(f"  unix_time : {loaded.unix_time}")
    print(f"  nonce     : {len(loaded.nonce)} bytes")
    print(f"  metadata  : {loaded.all_metadata()}")

    if loaded != snap:
        print("\n❌ Decoded snapshot differs from the one written")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
