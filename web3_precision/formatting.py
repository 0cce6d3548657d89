"""
Display formatting by significant digits.

format_native -> 4 significant digits, format_usd -> 8. Both never raise:
NaN / Infinity come back as sentinels and unparseable input as "Error".
"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

from config import (
    NATIVE_SIGNIFICANT_DIGITS,
    NUMERIC_CONFIG,
    USD_SIGNIFICANT_DIGITS,
)

from .errors import FormatError
from .numeric import NUMERIC_CONTEXT, exponential_notation, pow10, to_numeric

logger = logging.getLogger(__name__)

ERROR_SENTINEL = "Error"


def _round_significant(number: Decimal, significant_digits: int) -> Decimal:
    exponent = number.adjusted() - significant_digits + 1
    rounded = number.quantize(pow10(exponent), rounding=ROUND_HALF_UP)
    # 9.9996 -> 10.000: one digit too many, shift the quantum
    if rounded.adjusted() != number.adjusted():
        rounded = number.quantize(pow10(exponent + 1), rounding=ROUND_HALF_UP)
    return rounded


def to_precision(value: Any, significant_digits: int) -> str:
    """
    Round to exactly `significant_digits` significant digits.

    Trailing zeros are kept ("0" -> "0.000" for 4 digits). Exponential
    notation is used when the integer part needs more digits than requested
    or the value is below the configured exponential threshold.

    Raises:
        FormatError: value is not parseable as a number
    """
    if significant_digits < 1:
        raise ValueError(f"significant_digits must be >= 1, got {significant_digits}")

    try:
        number = to_numeric(value)
    except (TypeError, ValueError) as exc:
        raise FormatError(value) from exc

    if number.is_nan():
        return "NaN"
    if number.is_infinite():
        return "-Infinity" if number.is_signed() else "Infinity"

    if number.is_zero():
        if significant_digits == 1:
            return "0"
        return "0." + "0" * (significant_digits - 1)

    try:
        with localcontext(NUMERIC_CONTEXT):
            rounded = _round_significant(number, significant_digits)
    except ArithmeticError as exc:
        raise FormatError(value) from exc

    exponent = rounded.adjusted()
    if exponent >= significant_digits or exponent <= NUMERIC_CONFIG.exponential_at[0]:
        return exponential_notation(rounded)
    return format(rounded, "f")


def _format_or_sentinel(value: Any, significant_digits: int) -> str:
    try:
        return to_precision(value, significant_digits)
    except FormatError as exc:
        logger.debug(f"Formatting degraded to '{ERROR_SENTINEL}': {exc}")
        return ERROR_SENTINEL


def format_native(value: Any) -> str:
    """Native coin amount, 4 significant digits."""
    return _format_or_sentinel(value, NATIVE_SIGNIFICANT_DIGITS)


def format_usd(value: Any) -> str:
    """USD amount, 8 significant digits."""
    return _format_or_sentinel(value, USD_SIGNIFICANT_DIGITS)
