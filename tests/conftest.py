"""
Shared fixtures for all tests.
"""

from decimal import Decimal

import pytest


# Пара ETH (token0, 18 decimals) / USDC (token1, 6 decimals)
DECIMALS_ETH = 18
DECIMALS_USDC = 6
PRICE_USDC_PER_ETH = Decimal("2000")


@pytest.fixture
def eth_usdc_decimals():
    """(decimals0, decimals1) для ETH/USDC."""
    return DECIMALS_ETH, DECIMALS_USDC


@pytest.fixture
def price_usdc_per_eth():
    """2000 USDC за 1 ETH (token1/token0)."""
    return PRICE_USDC_PER_ETH
