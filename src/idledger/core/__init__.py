"""Core package initializer for idledger.

Holds the ambient configuration; downstream code can do:
    from idledger.core.settings import settings, load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
