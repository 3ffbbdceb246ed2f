"""idledger: versioned, content-addressed identity snapshots.

The public surface lives in :mod:`idledger.identity` (the snapshot record,
its codec, validator and writer) and :mod:`idledger.store` (content stores).
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
