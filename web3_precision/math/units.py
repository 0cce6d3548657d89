"""
Base-unit (wei) conversion

amount_wei = amount * 10^decimals

to_wei строгий: если после умножения остаётся дробная часть, это ошибка,
а не округление. from_wei наоборот округляет для отображения.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

from config import DEFAULT_DECIMALS, DEFAULT_DISPLAY_DP

from ..errors import InvalidInputError, NonIntegerResultError
from ..numeric import (
    check_decimals,
    parse_numeric,
    pow10,
    strip_trailing_zeros,
    to_plain_string,
    widened_context,
)

logger = logging.getLogger(__name__)


def _digit_count(number: Decimal) -> int:
    return len(number.as_tuple().digits)


def to_wei(amount: Any, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Точное преобразование суммы в smallest unit.

    Args:
        amount: Сумма (str, int, float, Decimal)
        decimals: Количество десятичных знаков токена (18 для ERC20, 6 для USDC)

    Returns:
        Целое число в wei как строка цифр (с минусом для отрицательных)

    Raises:
        InvalidInputError: amount не число / NaN, decimals некорректен
        NonIntegerResultError: у amount больше знаков после точки, чем decimals

    Example:
        >>> to_wei("1.5")
        '1500000000000000000'
        >>> to_wei("1", 6)
        '1000000'
    """
    operation = "to_wei"
    check_decimals(operation, decimals)
    number = parse_numeric(operation, amount, "decimal value")

    # scaleb меняет только экспоненту: коэффициент (любой длины) не округляется
    try:
        with localcontext(widened_context(_digit_count(number) + 2)):
            result = number.scaleb(decimals)
            is_integer = result.is_finite() and result == result.to_integral_value()
    except ArithmeticError as exc:
        raise InvalidInputError(
            operation, f"Value out of supported range: {amount!r}"
        ) from exc

    if not is_integer:
        raise NonIntegerResultError(
            operation,
            f"Result is not an integer after wei conversion: {to_plain_string(result)}",
        )

    return str(int(result))


def from_wei(
    base_units: Any,
    decimals: int = DEFAULT_DECIMALS,
    display_dp: int = DEFAULT_DISPLAY_DP,
) -> Decimal:
    """
    Преобразование smallest unit в человекочитаемую сумму.

    Результат округляется до display_dp знаков (ROUND_HALF_UP), хвостовые
    нули убираются. Для точного значения передай display_dp >= decimals.

    Args:
        base_units: Сумма в wei (str, int, Decimal)
        decimals: Количество десятичных знаков токена
        display_dp: Знаков после точки в результате

    Returns:
        Decimal

    Example:
        >>> from_wei("1500000000000000000")
        Decimal('1.5')
    """
    operation = "from_wei"
    check_decimals(operation, decimals)
    check_decimals(operation, display_dp, "display_dp")

    number = parse_numeric(operation, base_units, "wei value")
    if number.is_infinite():
        return number

    # Целая часть результата + display_dp знаков + перенос при округлении
    integer_digits = max(number.adjusted() - decimals + 1, 1)
    precision = max(_digit_count(number), integer_digits + display_dp) + 2

    try:
        with localcontext(widened_context(precision)):
            amount = number.scaleb(-decimals)
            rounded = amount.quantize(pow10(-display_dp), rounding=ROUND_HALF_UP)
    except ArithmeticError as exc:
        raise InvalidInputError(
            operation, f"Value out of supported range: {base_units!r}"
        ) from exc

    logger.debug(f"from_wei: {base_units} / 10^{decimals} -> {rounded}")
    return strip_trailing_zeros(rounded)
