"""Number formatting for displayed tolerances and limits."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

EMPTY = "-"


def format_number(value: Optional[float], decimals: int = 3) -> str:
    """
    Round to ``decimals`` digits and drop float noise and trailing zeros.

    Ties of the exact binary value round up (11.0625 -> 11.063).

    Example:
        >>> format_number(2.9000000000000004)
        '2.9'
        >>> format_number(10.0)
        '10'
    """
    if value is None:
        return EMPTY
    rounded = Decimal(value).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return "0"  # no "-0"
    if rounded == rounded.to_integral_value():
        return str(int(rounded))
    return format(rounded.normalize(), "f")


def format_tolerance(value: Optional[float], decimals: int = 3) -> str:
    if value is None:
        return EMPTY
    return f"±{format_number(value, decimals)}"
