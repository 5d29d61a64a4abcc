"""
Utility functions for SplitBills application
"""
from __future__ import annotations
import math
import os
import time

_last_id = 0


def safe_float(x, default: float = 0.0) -> float:
    """Convert value to a finite float, returning default on error"""
    try:
        v = float(x)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(v):
        return default
    return v


def clamp(value: float, low: float, high: float) -> float:
    return min(max(low, value), high)


def new_expense_id() -> int:
    """Time-derived id (microseconds), bumped past the previous one on collision"""
    global _last_id
    candidate = time.time_ns() // 1000
    if candidate <= _last_id:
        candidate = _last_id + 1
    _last_id = candidate
    return candidate


def format_money(x: float, symbol: str = "$") -> str:
    """Two-decimal currency, e.g. $12.50"""
    return f"{symbol}{x:.2f}"


def format_signed_money(x: float, symbol: str = "$") -> str:
    """Currency with a leading + for positive amounts"""
    return ("+" if x > 0 else "") + format_money(x, symbol)


def format_percent(x: float) -> str:
    return f"{x:.1f}%"


def app_dir() -> str:
    """
    Get application data directory: ~/.splitbills, or $SPLITBILLS_HOME when set.
    Creates directory if it doesn't exist.
    """
    path = os.environ.get("SPLITBILLS_HOME") or os.path.join(os.path.expanduser("~"), ".splitbills")
    os.makedirs(path, exist_ok=True)
    return path


def non_negative_amount(raw) -> float:
    """Parse an amount typed by the user; unparseable or negative input becomes 0"""
    return max(0.0, safe_float(raw, 0.0))


def format_friend(name: str, image=None) -> str:
    """List entry for a friend, with the image reference when there is one"""
    return f"{name}  [{image}]" if image else name
