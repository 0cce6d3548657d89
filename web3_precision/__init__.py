"""
web3-precision - высокоточные конвертации для token economics.

Все вычисления в decimal.Decimal с единой конфигурацией (config.NUMERIC_CONFIG):
- Wei конвертация (to_wei / from_wei)
- Цена <-> sqrtPriceX96 <-> tick (Uniswap V3)
- Форматирование по значащим цифрам (format_native / format_usd)
"""

from config import (
    DEFAULT_DECIMALS,
    DEFAULT_DISPLAY_DP,
    MAX_TICK,
    MIN_TICK,
    NATIVE_SIGNIFICANT_DIGITS,
    NUMERIC_CONFIG,
    USD_SIGNIFICANT_DIGITS,
    NumericConfig,
)

from .errors import (
    ConversionError,
    ErrorCause,
    FormatError,
    InvalidInputError,
    NonIntegerResultError,
    TickOutOfRangeError,
)
from .numeric import (
    NUMERIC_CONTEXT,
    Q96,
    Q192,
    TICK_BASE,
    to_numeric,
    to_plain_string,
)
from .math import (
    to_wei,
    from_wei,
    price_to_sqrt_price_x96,
    sqrt_price_x96_to_price,
    tick_to_price,
    price_to_tick,
    tick_to_sqrt_price_x96,
    sqrt_price_x96_to_tick,
)
from .formatting import format_native, format_usd, to_precision

__version__ = "1.0.0"

__all__ = [
    # Conversions
    "to_wei",
    "from_wei",
    "price_to_sqrt_price_x96",
    "sqrt_price_x96_to_price",
    "tick_to_price",
    "price_to_tick",
    "tick_to_sqrt_price_x96",
    "sqrt_price_x96_to_tick",
    # Formatting
    "format_native",
    "format_usd",
    "to_precision",
    # Numeric
    "to_numeric",
    "to_plain_string",
    "NumericConfig",
    "NUMERIC_CONFIG",
    "NUMERIC_CONTEXT",
    # Constants
    "DEFAULT_DECIMALS",
    "DEFAULT_DISPLAY_DP",
    "NATIVE_SIGNIFICANT_DIGITS",
    "USD_SIGNIFICANT_DIGITS",
    "Q96",
    "Q192",
    "TICK_BASE",
    "MIN_TICK",
    "MAX_TICK",
    # Errors
    "ConversionError",
    "ErrorCause",
    "FormatError",
    "InvalidInputError",
    "NonIntegerResultError",
    "TickOutOfRangeError",
]
