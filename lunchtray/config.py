"""Runtime configuration defaults for pricing and debug logging."""

from __future__ import annotations

import os
from decimal import Decimal

TAX_RATE = Decimal("0.08")

# Display precision only; OrderState keeps exact values.
CURRENCY_QUANTUM = Decimal("0.01")
CURRENCY_SYMBOL = "$"

DEBUG_LOG_ENV = "LUNCH_TRAY_DEBUG_LOG"
DEFAULT_DEBUG_LOG_PATH = "/tmp/lunch-tray-debug.log"


def debug_log_path() -> str:
    """Resolve the debug log path, honouring LUNCH_TRAY_DEBUG_LOG when set."""
    env_override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return env_override or DEFAULT_DEBUG_LOG_PATH
