"""
Verifier configuration from the environment.

Environment variables control behavior:
- EXPLORER_URL: Block explorer base URL (default: https://tomoscan.io)
- EXPLORER_TIMEOUT: Per-request timeout in seconds (default: 8)
- SOLC_BINARY_DIR: Where solc binaries live (default: py-solc-x folder)
- SOLC_ALLOW_INSTALL: Download missing compilers (default: true)
- LOG_LEVEL: Logging level name (default: WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _opt(name: str, default: str) -> str:
    """Get optional environment variable with default."""
    return os.getenv(name, default)


def _opt_bool(name: str, default: bool) -> bool:
    """Parse boolean environment variable."""
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _opt_float(name: str, default: float) -> float:
    """Parse float environment variable or raise on garbage."""
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v)
    except ValueError:
        raise RuntimeError(f"Invalid float for env var {name}: {v!r}") from None


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _opt_level(name: str, default: str) -> str:
    """Parse a logging level name or raise on an unknown one."""
    v = os.getenv(name, default).strip().upper()
    if v not in LOG_LEVELS:
        raise RuntimeError(f"Invalid log level for env var {name}: {v!r}")
    return v


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for a verification run."""

    EXPLORER_URL: str = "https://tomoscan.io"
    EXPLORER_TIMEOUT: float = 8.0

    # Compiler snapshots
    SOLC_BINARY_DIR: str = ""
    SOLC_ALLOW_INSTALL: bool = True

    LOG_LEVEL: str = "WARNING"

    @staticmethod
    def load() -> Settings:
        """Load settings from environment variables."""
        return Settings(
            EXPLORER_URL=_opt("EXPLORER_URL", "https://tomoscan.io").rstrip("/"),
            EXPLORER_TIMEOUT=_opt_float("EXPLORER_TIMEOUT", 8.0),
            SOLC_BINARY_DIR=_opt("SOLC_BINARY_DIR", ""),
            SOLC_ALLOW_INSTALL=_opt_bool("SOLC_ALLOW_INSTALL", True),
            LOG_LEVEL=_opt_level("LOG_LEVEL", "WARNING"),
        )
