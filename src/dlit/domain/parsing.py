"""Strict text parsing and numeric range rules.

All functions are pure and total: they return ``None`` when the input
cannot be converted exactly, and never raise.

INVARIANT: only ASCII notation is accepted. No surrounding whitespace,
no digit-group underscores, no hex forms.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Integer-valued decimal: the fractional part may only hold zeros ("6.", "6.000").
INT_PATTERN: re.Pattern[str] = re.compile(r"([+-]?[0-9]+)(?:\.0*)?")

FLOAT_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
FLOAT_SPECIAL_PATTERN: re.Pattern[str] = re.compile(
    r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE
)

TRUE_TOKENS: frozenset[str] = frozenset({"true", "t", "1"})
FALSE_TOKENS: frozenset[str] = frozenset({"false", "f", "0"})


def fits_int64(value: int) -> bool:
    """Whether *value* lies within the signed 64-bit range."""
    return INT64_MIN <= value <= INT64_MAX


def float_to_int(value: float) -> int | None:
    """Exact integer for an integral float inside the int64 range.

    Any fractional remainder fails; there is no rounding.
    """
    if not math.isfinite(value) or not value.is_integer():
        return None
    # 2**63 itself is representable as a float but not as an int64.
    if not (-(2.0**63) <= value < 2.0**63):
        return None
    return int(value)


def parse_int(text: str) -> int | None:
    """Parse integer-valued decimal text into an int64.

    ``"6"``, ``"-6"``, ``"6."`` and ``"6.000"`` give 6 / -6; ``"6.6"``,
    ``".0"`` and anything beyond the int64 range give None.
    """
    match = INT_PATTERN.fullmatch(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not fits_int64(value):
        return None
    return value


def parse_float(text: str) -> float | None:
    """Parse decimal or scientific notation into a float64.

    Accepts the ``inf``/``infinity``/``nan`` specials. A finite literal
    that overflows float64 (``"1e400"``) is rejected.
    """
    if FLOAT_SPECIAL_PATTERN.fullmatch(text):
        return float(text)
    if not FLOAT_PATTERN.fullmatch(text):
        return None
    value = float(text)
    if math.isinf(value):
        return None
    return value


def parse_bool(text: str) -> bool | None:
    """Match *text* case-insensitively against the boolean tokens."""
    token = text.lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return None


def format_float(value: float) -> str:
    """Render a float as its shortest round-trip positional text.

    Integral values drop the trailing ``.0`` (``124.0`` renders ``"124"``)
    and no exponent is ever emitted.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")
