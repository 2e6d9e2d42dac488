"""
Tip calculation and number formatting.

Everything here is pure: the same inputs always give the same string.
"""
import math
from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext
from typing import Optional

from PyQt6.QtCore import QLocale

from shared.constants import DEFAULT_TIP_PERCENT, MAX_FRACTION_DIGITS

_FRACTION_STEP = Decimal(1).scaleb(-MAX_FRACTION_DIGITS)


def _to_decimal(value: float) -> Decimal:
    """Convert a float to Decimal via its shortest repr."""
    return Decimal(str(value))


def parse_number(text: str) -> Optional[float]:
    """
    Parse free-text numeric input.
    
    Returns:
        The parsed value, or None for blank, malformed or non-finite text.
        Digit-group underscores ("1_000") count as malformed.
    """
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def round_tip(tip: float) -> int:
    """Round to the nearest whole unit, ties away from zero."""
    return int(_to_decimal(tip).to_integral_value(rounding=ROUND_HALF_UP))


def format_decimal(value: float, locale: Optional[QLocale] = None) -> str:
    """
    Format a number the way the locale writes decimals.
    
    Uses the locale's group separator and decimal point, keeps at most
    MAX_FRACTION_DIGITS fraction digits and drops trailing zeros.
    
    Args:
        value: Finite number to format
        locale: Locale to format for; defaults to the process locale
    """
    if locale is None:
        locale = QLocale()
    
    number = _to_decimal(value)
    with localcontext() as ctx:
        # Room for every integer digit plus the kept fraction digits
        ctx.prec = max(ctx.prec, number.adjusted() + MAX_FRACTION_DIGITS + 2)
        if number.as_tuple().exponent < -MAX_FRACTION_DIGITS:
            number = number.quantize(_FRACTION_STEP, rounding=ROUND_HALF_EVEN)
        if number.is_zero():
            number = Decimal(0)  # no "-0"
        digits = max(0, -number.normalize().as_tuple().exponent)
    
    return locale.toString(float(number), "f", digits)


def calculate_tip(
    amount: Optional[float],
    tip_percent: float = DEFAULT_TIP_PERCENT,
    round_up: bool = False,
    locale: Optional[QLocale] = None,
) -> str:
    """
    Work out the tip for a bill.
    
    Args:
        amount: Bill amount, or None when there is none
        tip_percent: Tip as a percentage of the bill
        round_up: Show the tip rounded to a whole number
        locale: Locale for the decimal display
    
    Returns:
        Tip text, or an empty string when amount is None
    """
    if amount is None:
        return ""
    
    tip = tip_percent / 100 * amount
    if not math.isfinite(tip):
        tip = 0.0  # product overflowed the float range
    if round_up:
        return str(round_tip(tip))
    return format_decimal(tip, locale)
