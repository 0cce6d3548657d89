"""
Numeric primitives

Все вычисления идут через decimal.Decimal внутри контекста, собранного один
раз из NUMERIC_CONFIG. Функции никогда не меняют контекст потока вызывающего
кода: каждая операция работает в localcontext(NUMERIC_CONTEXT).

Константы:
- Q96 = 2^96, Q192 = 2^192 (fixed-point для sqrtPriceX96)
- TICK_BASE = 1.0001, LN_TICK_BASE = ln(1.0001) с полной точностью
"""

import re
from decimal import Context, Decimal, InvalidOperation, localcontext
from typing import Any, Optional, Union

from config import (
    NUMERIC_CONFIG,
    TICK_BASE_LITERAL,
    NumericConfig,
)

from .errors import InvalidInputError

NumericLike = Union[Decimal, int, float, str]

NUMERIC_CONTEXT = NUMERIC_CONFIG.make_context()

# Из int, без округления контекстом
Q96 = Decimal(2 ** 96)
Q192 = Decimal(2 ** 192)

TICK_BASE = Decimal(TICK_BASE_LITERAL)

with localcontext(NUMERIC_CONTEXT):
    LN_TICK_BASE = TICK_BASE.ln()

# 0x1f, -0b101, 0o17
_PREFIXED_INT = re.compile(r"^[+-]?0[xob][0-9a-f]+$", re.IGNORECASE)


def to_numeric(value: Any) -> Decimal:
    """
    Парсинг значения в Decimal.

    Принимает Decimal, int, float (через str, как везде в проекте) и str
    (десятичная запись, экспонента, NaN, Infinity, hex/octal/binary int).

    Raises:
        TypeError: Неподдерживаемый тип (включая bool)
        ValueError: Строка не является числом
    """
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, bool):
        raise TypeError("bool is not a numeric value")
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(str(value))
    elif isinstance(value, str):
        number = _parse_string(value)
    else:
        raise TypeError(f"Unsupported numeric type: {type(value).__name__}")

    if number.is_snan():
        return Decimal("NaN")
    return number


def _parse_string(text: str) -> Decimal:
    stripped = text.strip()
    if _PREFIXED_INT.match(stripped):
        return Decimal(int(stripped, 0))
    try:
        with localcontext(NUMERIC_CONTEXT):
            return Decimal(stripped)
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {text!r}") from exc


def parse_numeric(operation: str, value: Any, label: str) -> Decimal:
    """to_numeric для конвертаций: любой сбой парсинга и NaN -> InvalidInputError."""
    try:
        number = to_numeric(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(operation, f"Invalid {label}: {value!r}") from exc

    if number.is_nan():
        raise InvalidInputError(operation, f"Invalid {label}: {value!r}")
    return number


def parse_positive(operation: str, value: Any, label: str) -> Decimal:
    """Конечное число строго больше нуля."""
    number = parse_numeric(operation, value, label)
    if number.is_infinite() or number <= 0:
        raise InvalidInputError(operation, f"Invalid {label}: {value!r}")
    return number


def check_decimals(operation: str, decimals: Any, label: str = "decimals") -> int:
    """decimals - неотрицательный int."""
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise InvalidInputError(operation, f"Invalid {label}: {decimals!r}")
    return decimals


def pow10(exponent: int) -> Decimal:
    """10^exponent, точно (коэффициент 1)."""
    return Decimal(1).scaleb(exponent)


def widened_context(digits: int) -> Context:
    """Копия NUMERIC_CONTEXT с точностью не меньше digits значащих цифр."""
    context = NUMERIC_CONTEXT.copy()
    context.prec = max(context.prec, digits)
    return context


def _trim_zeros(value: Decimal, max_exponent: Optional[int] = None) -> Decimal:
    # Только цифры коэффициента, без округления контекстом
    sign, digits, exponent = value.as_tuple()
    digits = list(digits)
    while (len(digits) > 1 and digits[-1] == 0
           and (max_exponent is None or exponent < max_exponent)):
        digits.pop()
        exponent += 1
    return Decimal((sign, tuple(digits), exponent))


def strip_trailing_zeros(value: Decimal) -> Decimal:
    """
    Убирает хвостовые нули дробной части, не переходя в экспоненту.

    1.500000 -> 1.5, 100.000 -> 100, -0.000 -> 0
    """
    if not value.is_finite():
        return value
    if value.is_zero():
        return Decimal(0)
    if value.as_tuple().exponent >= 0:
        return Decimal(int(value))
    return _trim_zeros(value, 0)


def exponential_notation(value: Decimal) -> str:
    """
    Экспоненциальная запись с сохранением всех цифр коэффициента.

    Decimal("1.500E+30") -> "1.500e+30"
    """
    sign, digits, _ = value.as_tuple()
    coefficient = "".join(str(d) for d in digits)
    mantissa = coefficient[0]
    if len(coefficient) > 1:
        mantissa += "." + coefficient[1:]

    exponent = value.adjusted()
    exp_sign = "+" if exponent >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exponent)}"


def to_plain_string(value: Decimal, config: NumericConfig = NUMERIC_CONFIG) -> str:
    """
    Строковое представление Decimal.

    Обычная запись при neg < e < pos (config.exponential_at),
    иначе экспоненциальная. Хвостовые нули убираются.

    Examples:
        >>> to_plain_string(Decimal("1.5E+3"))
        '1500'
        >>> to_plain_string(Decimal("2E-25"))
        '2e-25'
    """
    if value.is_nan():
        return "NaN"
    if value.is_infinite():
        return "-Infinity" if value.is_signed() else "Infinity"

    value = strip_trailing_zeros(value)
    negative, positive = config.exponential_at
    if negative < value.adjusted() < positive:
        return format(value, "f")
    return exponential_notation(_trim_zeros(value))
