"""
web3-precision demo

Прогоняет все конвертации на примерах:
- Wei конвертация
- Цена <-> sqrtPriceX96
- Tick <-> цена
- Форматирование
- Токены с разными decimals (ETH 18 / USDC 6)

LOG_LEVEL берётся из окружения (.env поддерживается), по умолчанию WARNING.
"""

import logging
import os
from decimal import Decimal

from dotenv import load_dotenv

from web3_precision import (
    format_native,
    format_usd,
    from_wei,
    price_to_sqrt_price_x96,
    price_to_tick,
    sqrt_price_x96_to_price,
    tick_to_price,
    to_plain_string,
    to_wei,
)


def setup_logging():
    """Настройка логирования из LOG_LEVEL."""
    level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )


def wei_examples():
    print("1. Wei конвертация:")
    ether_amount = "1.5"
    wei_amount = to_wei(ether_amount)
    print(f"{ether_amount} ETH = {wei_amount} wei")

    back_to_ether = from_wei(wei_amount)
    print(f"{wei_amount} wei = {back_to_ether} ETH\n")


def sqrt_price_examples():
    print("2. Цена <-> sqrtPriceX96:")
    price = "2000"
    sqrt_price_x96 = price_to_sqrt_price_x96(price)
    print(f"Цена {price} -> sqrtPriceX96: {sqrt_price_x96}")

    back_to_price = sqrt_price_x96_to_price(sqrt_price_x96)
    print(f"sqrtPriceX96 -> цена: {to_plain_string(back_to_price)}\n")


def tick_examples():
    print("3. Tick <-> цена:")
    tick = 1000
    price_from_tick = tick_to_price(tick)
    print(f"Tick {tick} -> цена: {to_plain_string(price_from_tick)}")

    tick_from_price = price_to_tick(price_from_tick)
    print(f"Цена -> tick: {tick_from_price}\n")


def format_examples():
    print("4. Форматирование:")
    print(f"Native: {format_native(Decimal('1.23456789'))}")
    print(f"USD: {format_usd(Decimal('1234.56789012'))}\n")


def mixed_decimals_examples():
    print("5. Токены с разными decimals (ETH=token0 18, USDC=token1 6):")
    usdc_price = "2000"
    sqrt_price_x96 = price_to_sqrt_price_x96(usdc_price, 18, 6)
    print(f"USDC/ETH {usdc_price} -> sqrtPriceX96: {sqrt_price_x96}")

    restored = sqrt_price_x96_to_price(sqrt_price_x96, 18, 6)
    print(f"sqrtPriceX96 -> USDC/ETH: {format_usd(restored)}")

    tick = price_to_tick(usdc_price, 18, 6)
    print(f"USDC/ETH {usdc_price} -> tick: {tick} -> {format_usd(tick_to_price(tick, 18, 6))}\n")


def main():
    """Главная функция."""
    load_dotenv()
    setup_logging()

    print("=== web3-precision demo ===\n")
    wei_examples()
    sqrt_price_examples()
    tick_examples()
    format_examples()
    mixed_decimals_examples()
    print("=== Готово ===")


if __name__ == "__main__":
    main()
