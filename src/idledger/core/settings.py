"""Centralized configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the repository root: .env, .env.local, .env.dev/.env.test/.env.prod
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Upper bound accepted by the snapshot validator for a nonce.
MAX_NONCE_SIZE = 64


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    store_dir : Path
        Root directory of the on-disk object store; maps from `IDLEDGER_STORE_DIR`.
    nonce_size : int
        Default number of random bytes produced by `make_nonce()`;
        maps from `IDLEDGER_NONCE_SIZE`.
    """

    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    store_dir: Path = Field(
        default=Path(".idledger") / "objects", alias="IDLEDGER_STORE_DIR"
    )
    nonce_size: int = Field(default=20, ge=0, le=MAX_NONCE_SIZE, alias="IDLEDGER_NONCE_SIZE")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "idledger") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
