# engine/numeric.py
"""
Numeric helpers shared by the engine. ZERO DB access.

The product's historical numbers were produced with JavaScript
(parseInt, Math.round, toFixed). These helpers reproduce that behaviour
so stored scores and dashboard figures keep the same scale.
"""
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

MAX_INT_DIGITS = 15
# ASCII digits only; a longer run is not a number
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]{1," + str(MAX_INT_DIGITS) + r"})(?![0-9])")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero on the decimal representation (7.75 → 7.8, 62.5 → 63)."""
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)


def parse_int_prefix(value: Optional[str]) -> Optional[int]:
    """
    Leading-integer parse, parseInt-style: "7" → 7, " 8/10" → 8, "7.9" → 7,
    "x" → None. None means "not a number". Non-ASCII digits and
    digit runs longer than MAX_INT_DIGITS are not numbers either.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))
