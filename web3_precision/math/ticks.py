"""
Uniswap V3 Tick Mathematics

Основные формулы:
- price(i) = 1.0001^i
- sqrtPriceX96 = floor(sqrt(price) * 2^96)

Price всегда token1/token0 в человеческих единицах. Внутри пула цена в
smallest units, поэтому:
- price -> pool:  price * 10^(decimals1 - decimals0)
- pool -> price:  pool_price * 10^(decimals0 - decimals1)

Все вычисления в Decimal (sqrt, ln, целая степень), float не используется.
"""

import logging
from decimal import Decimal, ROUND_DOWN, ROUND_HALF_UP, localcontext
from typing import Any

from config import (
    DEFAULT_DECIMALS,
    MAX_TICK,
    MIN_TICK,
)

from ..errors import InvalidInputError, TickOutOfRangeError
from ..numeric import (
    LN_TICK_BASE,
    NUMERIC_CONTEXT,
    Q192,
    Q96,
    TICK_BASE,
    check_decimals,
    parse_numeric,
    parse_positive,
    pow10,
)

logger = logging.getLogger(__name__)

__all__ = [
    "price_to_sqrt_price_x96",
    "sqrt_price_x96_to_price",
    "tick_to_price",
    "price_to_tick",
    "tick_to_sqrt_price_x96",
    "sqrt_price_x96_to_tick",
]


def _check_decimals_pair(operation: str, decimals0: Any, decimals1: Any) -> None:
    check_decimals(operation, decimals0, "decimals0")
    check_decimals(operation, decimals1, "decimals1")


def _check_tick(operation: str, tick: Any) -> int:
    """Тик как int в [MIN_TICK, MAX_TICK]. Границы включены."""
    if isinstance(tick, bool):
        raise InvalidInputError(operation, f"Invalid tick: {tick!r}")

    if not isinstance(tick, int):
        number = parse_numeric(operation, tick, "tick")
        if number.is_infinite():
            raise TickOutOfRangeError(operation, tick)
        if number != number.to_integral_value():
            raise InvalidInputError(operation, f"Tick must be an integer: {tick!r}")
        tick = int(number)

    if tick < MIN_TICK or tick > MAX_TICK:
        raise TickOutOfRangeError(operation, tick)
    return tick


def _out_of_range(operation: str, label: str, value: Any) -> InvalidInputError:
    return InvalidInputError(operation, f"{label} out of supported range: {value!r}")


def _scale(operation: str, number: Decimal, exponent: int, label: str, value: Any) -> Decimal:
    """number * 10^exponent в пределах [Emin, Emax] контекста, иначе InvalidInputError."""
    try:
        scaled = number * pow10(exponent)
    except ArithmeticError as exc:
        raise _out_of_range(operation, label, value) from exc
    # Underflow не ловится контекстом: результат молча становится нулём
    if scaled.is_zero():
        raise _out_of_range(operation, label, value)
    return scaled


def _pool_price_from_sqrt(operation: str, sqrt_price: Decimal, value: Any) -> Decimal:
    try:
        pool_price = sqrt_price * sqrt_price / Q192
    except ArithmeticError as exc:
        raise _out_of_range(operation, "sqrtPriceX96", value) from exc
    if pool_price.is_zero():
        raise _out_of_range(operation, "sqrtPriceX96", value)
    return pool_price


def _encode_sqrt_price(pool_price: Decimal) -> str:
    # Округление вниз: закодированная цена никогда не завышена
    sqrt_price_x96 = pool_price.sqrt() * Q96
    return str(int(sqrt_price_x96.to_integral_value(rounding=ROUND_DOWN)))


def _nearest_tick(operation: str, pool_price: Decimal) -> int:
    raw_tick = pool_price.ln() / LN_TICK_BASE
    # int() убирает -0
    tick = int(raw_tick.to_integral_value(rounding=ROUND_HALF_UP))

    if tick < MIN_TICK or tick > MAX_TICK:
        raise TickOutOfRangeError(
            operation, tick, f"Calculated tick out of range: {tick}"
        )
    return tick


def price_to_sqrt_price_x96(
    price: Any,
    decimals0: int = DEFAULT_DECIMALS,
    decimals1: int = DEFAULT_DECIMALS,
) -> str:
    """
    Конвертация цены в sqrtPriceX96.

    sqrtPriceX96 = floor(sqrt(price * 10^(decimals1 - decimals0)) * 2^96)

    Args:
        price: Цена token1/token0 (например 2000 USDC за 1 ETH)
        decimals0: Decimals token0
        decimals1: Decimals token1

    Returns:
        sqrtPriceX96 как строка цифр

    Raises:
        InvalidInputError: price не число, NaN, <= 0, бесконечность или вне
            диапазона экспоненты контекста

    Example:
        >>> price_to_sqrt_price_x96(1)
        '79228162514264337593543950336'
    """
    operation = "price_to_sqrt_price_x96"
    _check_decimals_pair(operation, decimals0, decimals1)

    with localcontext(NUMERIC_CONTEXT):
        price_d = parse_positive(operation, price, "price")
        pool_price = _scale(operation, price_d, decimals1 - decimals0, "Price", price)
        result = _encode_sqrt_price(pool_price)

    logger.debug(f"{operation}: price={price} ({decimals0}/{decimals1}) -> {result}")
    return result


def sqrt_price_x96_to_price(
    sqrt_price_x96: Any,
    decimals0: int = DEFAULT_DECIMALS,
    decimals1: int = DEFAULT_DECIMALS,
) -> Decimal:
    """
    Конвертация sqrtPriceX96 в цену.

    price = (sqrtPriceX96 / 2^96)^2 * 10^(decimals0 - decimals1)

    Считается как sqrtPriceX96^2 / 2^192: одно деление, одно округление.

    Args:
        sqrt_price_x96: sqrtPriceX96 (str, int, Decimal, hex строка)
        decimals0: Decimals token0
        decimals1: Decimals token1

    Returns:
        Цена token1/token0 с полной точностью
    """
    operation = "sqrt_price_x96_to_price"
    _check_decimals_pair(operation, decimals0, decimals1)

    with localcontext(NUMERIC_CONTEXT):
        sqrt_price = parse_positive(operation, sqrt_price_x96, "sqrtPriceX96")
        pool_price = _pool_price_from_sqrt(operation, sqrt_price, sqrt_price_x96)
        return _scale(operation, pool_price, decimals0 - decimals1, "Price", sqrt_price_x96)


def tick_to_price(
    tick: int,
    decimals0: int = DEFAULT_DECIMALS,
    decimals1: int = DEFAULT_DECIMALS,
) -> Decimal:
    """
    Конвертация тика в цену.

    price = 1.0001^tick * 10^(decimals0 - decimals1)

    Args:
        tick: Номер тика в [MIN_TICK, MAX_TICK]
        decimals0: Decimals token0
        decimals1: Decimals token1

    Returns:
        Цена token1/token0

    Raises:
        TickOutOfRangeError: Тик вне диапазона
        InvalidInputError: Тик не целое число

    Example:
        # Pool ETH (18) / USDC (6), tick = -200311
        price = tick_to_price(-200311, 18, 6)  # ~2000 USDC per ETH
    """
    operation = "tick_to_price"
    tick = _check_tick(operation, tick)
    _check_decimals_pair(operation, decimals0, decimals1)

    with localcontext(NUMERIC_CONTEXT):
        pool_price = TICK_BASE ** tick
        return _scale(operation, pool_price, decimals0 - decimals1, "Price", tick)


def price_to_tick(
    price: Any,
    decimals0: int = DEFAULT_DECIMALS,
    decimals1: int = DEFAULT_DECIMALS,
) -> int:
    """
    Конвертация цены в ближайший тик.

    tick = round(ln(price * 10^(decimals1 - decimals0)) / ln(1.0001))

    Логарифм считается в Decimal с полной точностью контекста, поэтому
    price_to_tick(tick_to_price(t)) == t для любого допустимого t.
    В обратную сторону тик дискретный: tick_to_price(price_to_tick(p))
    отличается от p не больше чем на половину шага (1.0001).

    Args:
        price: Цена token1/token0
        decimals0: Decimals token0
        decimals1: Decimals token1

    Returns:
        Tick (целое число)

    Raises:
        InvalidInputError: price не число, NaN, <= 0, бесконечность или вне
            диапазона экспоненты контекста
        TickOutOfRangeError: Тик вне [MIN_TICK, MAX_TICK]
    """
    operation = "price_to_tick"
    _check_decimals_pair(operation, decimals0, decimals1)

    with localcontext(NUMERIC_CONTEXT):
        price_d = parse_positive(operation, price, "price")
        pool_price = _scale(operation, price_d, decimals1 - decimals0, "Price", price)
        tick = _nearest_tick(operation, pool_price)

    logger.debug(f"{operation}: price={price} ({decimals0}/{decimals1}) -> tick {tick}")
    return tick


def tick_to_sqrt_price_x96(tick: int) -> str:
    """
    Конвертация тика в sqrtPriceX96.

    sqrtPriceX96 = floor(sqrt(1.0001^tick) * 2^96)

    Args:
        tick: Номер тика

    Returns:
        sqrtPriceX96 как строка цифр
    """
    operation = "tick_to_sqrt_price_x96"
    tick = _check_tick(operation, tick)

    with localcontext(NUMERIC_CONTEXT):
        return _encode_sqrt_price(TICK_BASE ** tick)


def sqrt_price_x96_to_tick(sqrt_price_x96: Any) -> int:
    """
    Ближайший тик для sqrtPriceX96 пула (slot0).

    Args:
        sqrt_price_x96: sqrtPriceX96 (str, int, Decimal, hex строка)

    Returns:
        Tick (целое число)
    """
    operation = "sqrt_price_x96_to_tick"

    with localcontext(NUMERIC_CONTEXT):
        sqrt_price = parse_positive(operation, sqrt_price_x96, "sqrtPriceX96")
        pool_price = _pool_price_from_sqrt(operation, sqrt_price, sqrt_price_x96)
        return _nearest_tick(operation, pool_price)
