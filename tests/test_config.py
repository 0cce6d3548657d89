"""
Tests for config.py module.

Covers constants and NumericConfig:
- Token / display defaults
- Tick domain bounds
- NumericConfig validation and make_context()
"""

import dataclasses
from decimal import (
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Rounded,
)

import pytest

from config import (
    DEFAULT_DECIMALS,
    DEFAULT_DISPLAY_DP,
    MAX_PRICE_INTEGER_DIGITS,
    MAX_TICK,
    MIN_TICK,
    NATIVE_SIGNIFICANT_DIGITS,
    NUMERIC_CONFIG,
    TICK_BASE_LITERAL,
    USD_SIGNIFICANT_DIGITS,
    NumericConfig,
)


# ============================================================
# Constants
# ============================================================

class TestDefaults:
    """Token / display defaults."""

    def test_default_decimals(self):
        assert DEFAULT_DECIMALS == 18

    def test_default_display_dp(self):
        assert DEFAULT_DISPLAY_DP == 6

    def test_significant_digits(self):
        assert NATIVE_SIGNIFICANT_DIGITS == 4
        assert USD_SIGNIFICANT_DIGITS == 8


class TestTickDomain:
    """Uniswap V3 tick bounds."""

    def test_tick_bounds(self):
        assert MIN_TICK == -887272
        assert MAX_TICK == 887272
        assert MIN_TICK == -MAX_TICK

    def test_tick_base(self):
        assert TICK_BASE_LITERAL == "1.0001"

    def test_max_price_integer_digits(self):
        """1.0001^887272 ~ 3.4e38: 39 цифр."""
        assert MAX_PRICE_INTEGER_DIGITS == 39


# ============================================================
# NumericConfig
# ============================================================

class TestNumericConfig:
    """NumericConfig defaults and validation."""

    def test_defaults(self):
        assert NUMERIC_CONFIG.decimal_places == 40
        assert NUMERIC_CONFIG.precision == 100
        assert NUMERIC_CONFIG.rounding == ROUND_HALF_UP
        assert NUMERIC_CONFIG.exponential_at == (-20, 20)

    def test_precision_covers_decimal_places_at_max_price(self):
        assert NUMERIC_CONFIG.precision >= (
            NUMERIC_CONFIG.decimal_places + MAX_PRICE_INTEGER_DIGITS
        )

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            NUMERIC_CONFIG.precision = 10

    def test_precision_too_small_rejected(self):
        with pytest.raises(ValueError, match="precision"):
            NumericConfig(decimal_places=40, precision=78)

    def test_minimal_precision_accepted(self):
        cfg = NumericConfig(decimal_places=40, precision=79)
        assert cfg.precision == 79

    def test_negative_decimal_places_rejected(self):
        with pytest.raises(ValueError, match="decimal_places"):
            NumericConfig(decimal_places=-1)

    @pytest.mark.parametrize("bounds", [(1, 20), (-20, -1)])
    def test_invalid_exponential_at_rejected(self, bounds):
        with pytest.raises(ValueError, match="exponential_at"):
            NumericConfig(exponential_at=bounds)

    def test_invalid_exponent_range_rejected(self):
        with pytest.raises(ValueError, match="exponent_range"):
            NumericConfig(exponent_range=0)


class TestMakeContext:
    """decimal.Context, собранный из конфигурации."""

    def test_context_matches_config(self):
        ctx = NUMERIC_CONFIG.make_context()
        assert ctx.prec == 100
        assert ctx.rounding == ROUND_HALF_UP
        assert ctx.Emin == -NUMERIC_CONFIG.exponent_range
        assert ctx.Emax == NUMERIC_CONFIG.exponent_range

    def test_traps(self):
        ctx = NUMERIC_CONFIG.make_context()
        assert ctx.traps[InvalidOperation]
        assert ctx.traps[DivisionByZero]
        assert ctx.traps[Overflow]
        assert not ctx.traps[Inexact]
        assert not ctx.traps[Rounded]

    def test_custom_rounding(self):
        cfg = NumericConfig(rounding=ROUND_HALF_EVEN)
        assert cfg.make_context().rounding == ROUND_HALF_EVEN

    def test_new_context_each_call(self):
        assert NUMERIC_CONFIG.make_context() is not NUMERIC_CONFIG.make_context()
