"""
Utility functions for BankLedger
"""
from __future__ import annotations
import math
import numbers
from decimal import Decimal
from typing import Any, Optional


def to_number(x: Any) -> Optional[float]:
    """
    Coerce a raw amount (number or numeric string) to a finite float.
    Returns None when the value is not a usable number.
    Blank strings count as 0; digit separators and non-ASCII digits are not numbers.
    """
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, str):
        s = x.strip()
        if not s:
            return 0.0
        if "_" in s or not s.isascii():
            return None
        try:
            v = float(s)
        except ValueError:
            return None
    elif isinstance(x, (numbers.Real, Decimal)):
        try:
            v = float(x)
        except (OverflowError, ValueError):
            # ints beyond float range, signaling NaN
            return None
    else:
        return None
    if math.isnan(v) or math.isinf(v):
        return None
    return v


def display(x: Any) -> str:
    """str() for reason messages; ints too long to render are summarised"""
    try:
        return str(x)
    except ValueError:
        return f"<{type(x).__name__} too large to display>"


def format_number(x: float) -> str:
    """Render a number without a trailing .0 (e.g. 0, -100, 250.5)"""
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


def format_money(x: float) -> str:
    return f"{x:.2f}"
