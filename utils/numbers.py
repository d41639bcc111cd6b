from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional


def to_number(value: Any) -> float:
    """
    Coerce raw form input to a float. Anything that is not a finite decimal
    number (empty text, 'abc', None, NaN, inf) becomes 0.0; never raises.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        # float() accepts digit-group underscores and non-ASCII digits, a number field does not
        if not text or "_" in text or not text.isascii():
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


# JS toFixed falls back to exponent notation from here on
EXPONENT_THRESHOLD = 1e21


def _quantize(value: float, digits: int) -> Decimal:
    # Half away from zero on the exact binary value, like JS toFixed
    # + 0.0 turns -0.0 into 0.0
    with localcontext() as ctx:
        # Up to 21 integer digits below the threshold
        ctx.prec = max(ctx.prec, 22 + digits)
        return Decimal(value + 0.0).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def _special(value: float) -> Optional[str]:
    """Text for values toFixed does not round: NaN, infinities and |x| >= 1e21."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= EXPONENT_THRESHOLD:
        # repr matches JS shortest round-trip text here, e.g. '-5e+29'
        return repr(value)
    return None


def round_half_away(value: float, digits: int) -> float:
    if not math.isfinite(value) or abs(value) >= EXPONENT_THRESHOLD:
        return value
    return float(_quantize(value, digits))


def format_fixed(value: float, digits: int) -> str:
    """Fixed-point text with exactly `digits` decimals, e.g. -0.5 -> '-0.5000'."""
    special = _special(value)
    if special is not None:
        return special
    return f"{_quantize(value, digits):f}"


def format_compact(value: float, digits: int) -> str:
    """
    Round to `digits` decimals and drop trailing zeros: 35.0 -> '35',
    -0.50004 -> '-0.5'. A value that rounds to zero prints as '0'.
    """
    special = _special(value)
    if special is not None:
        return special
    rounded = _quantize(value, digits)
    if rounded == 0:
        return "0"
    return f"{rounded.normalize():f}"
