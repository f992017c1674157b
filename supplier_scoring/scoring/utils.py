"""
Numeric and Category Utilities
supplier_scoring/scoring/utils.py

Rounding, clamping and averaging helpers shared by the scoring modules, plus
parsing of "N. Name" category strings.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP
from numbers import Integral, Real
from typing import Any, Iterable, Optional

_CATEGORY_ID_RE = re.compile(r"^(\d+)\.")
_CATEGORY_PREFIX_RE = re.compile(r"^\d+\.\s*")
_LEADING_DIGITS_RE = re.compile(r"^(\d+)")


def is_number(value: Any) -> bool:
    """True for real, finite numbers (int, float, Decimal). Booleans are not scores."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        # ints of any size are finite; float conversion could overflow
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if not isinstance(value, Real):
        return False
    return not math.isnan(value) and not math.isinf(value)


def as_decimal(value: Any) -> Decimal:
    """Exact Decimal for ints and Decimals; other reals go through float."""
    if isinstance(value, (Integral, Decimal)):
        return Decimal(value)
    return Decimal(float(value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def clamp(value, min_val=1, max_val=4):
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: Iterable[float]) -> float:
    """
    Arithmetic mean.

    Returns 0.0 for an empty iterable.
    """
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def extract_category_id(category: Optional[str]) -> str:
    """'1. Material Sourcing' -> '1'. Empty string when there is no 'N.' prefix."""
    match = _CATEGORY_ID_RE.match((category or "").strip())
    return match.group(1) if match else ""


def extract_category_name(category: Optional[str]) -> str:
    """'1. Material Sourcing' -> 'Material Sourcing'."""
    return _CATEGORY_PREFIX_RE.sub("", (category or "").strip()).strip()


def leading_digits(text: Optional[str]) -> str:
    """Leading digit run of text ('1d.2' -> '1'), empty string if none."""
    match = _LEADING_DIGITS_RE.match(text or "")
    return match.group(1) if match else ""
