"""Runtime configuration defaults for pricing and debug logging."""

from __future__ import annotations

import logging
import os
from decimal import Decimal, InvalidOperation


def env_decimal(name: str, default: str) -> Decimal:
    """Read a decimal override, falling back to ``default`` when unset or malformed."""
    raw = os.environ.get(name, "").strip()
    if raw:
        try:
            return Decimal(raw)
        except InvalidOperation:
            pass
    return Decimal(default)


def env_log_level(name: str, default: str) -> str:
    """Read a logging level name, falling back to ``default`` when unset or unknown."""
    raw = os.environ.get(name, "").strip().upper()
    if raw and isinstance(logging.getLevelName(raw), int):
        return raw
    return default


TAX_RATE = env_decimal("LUNCH_TRAY_TAX_RATE", "0.08")
CURRENCY_SYMBOL = "$"

# A TUI owns the terminal, so debug output goes to a file.
LOG_PATH = os.environ.get("LUNCH_TRAY_LOG_PATH", "").strip() or "/tmp/lunch-tray-debug.log"
LOG_LEVEL = env_log_level("LUNCH_TRAY_LOG_LEVEL", "DEBUG")
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
