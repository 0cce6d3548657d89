"""
Configuration for web3-precision

Единая конфигурация точности для всех конвертаций:
- Decimal контекст (точность, округление, диапазон экспоненты)
- Базовые константы (decimals по умолчанию, границы тиков)

Конфигурация создаётся один раз при импорте и никогда не меняется.
"""

from dataclasses import dataclass
from decimal import (
    Context,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
)
from typing import Tuple


# ============================================================
# TOKEN / DISPLAY DEFAULTS
# ============================================================

DEFAULT_DECIMALS = 18       # ERC20 стандарт (ETH, BNB, большинство токенов)
DEFAULT_DISPLAY_DP = 6      # Знаков после точки в from_wei

# Значащие цифры при форматировании
NATIVE_SIGNIFICANT_DIGITS = 4
USD_SIGNIFICANT_DIGITS = 8

# ============================================================
# TICK DOMAIN (Uniswap V3)
# ============================================================

TICK_BASE_LITERAL = "1.0001"
MIN_TICK = -887272
MAX_TICK = 887272

# 1.0001 ** MAX_TICK ~ 3.4e38 -> 39 цифр целой части
MAX_PRICE_INTEGER_DIGITS = 39


# ============================================================
# NUMERIC CONFIGURATION
# ============================================================

@dataclass(frozen=True)
class NumericConfig:
    """
    Конфигурация Decimal арифметики.

    decimal_places: гарантированное число знаков после точки для любого
        результата в поддерживаемом диапазоне
    precision: рабочая точность контекста (значащие цифры)
    rounding: режим округления для арифметики
    exponential_at: (neg, pos) пороги экспоненциальной записи в
        to_plain_string: экспонента e <= neg или e >= pos
    exponent_range: Emin = -exponent_range, Emax = exponent_range
    """
    decimal_places: int = 40
    precision: int = 100
    rounding: str = ROUND_HALF_UP
    exponential_at: Tuple[int, int] = (-20, 20)
    exponent_range: int = 10 ** 9

    def __post_init__(self):
        if self.decimal_places < 0:
            raise ValueError(f"decimal_places must be >= 0, got {self.decimal_places}")

        required = self.decimal_places + MAX_PRICE_INTEGER_DIGITS
        if self.precision < required:
            raise ValueError(
                f"precision {self.precision} is too small: need at least {required} "
                f"significant digits to keep {self.decimal_places} decimal places "
                f"at the largest tick price"
            )

        negative, positive = self.exponential_at
        if negative > 0 or positive < 0:
            raise ValueError(f"Invalid exponential_at: {self.exponential_at}")

        if self.exponent_range <= 0:
            raise ValueError(f"exponent_range must be positive, got {self.exponent_range}")

    def make_context(self) -> Context:
        """Новый decimal.Context по этой конфигурации."""
        return Context(
            prec=self.precision,
            rounding=self.rounding,
            Emin=-self.exponent_range,
            Emax=self.exponent_range,
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )


# Единственный экземпляр на процесс
NUMERIC_CONFIG = NumericConfig()
