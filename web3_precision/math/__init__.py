from .units import to_wei, from_wei
from .ticks import (
    price_to_sqrt_price_x96,
    sqrt_price_x96_to_price,
    tick_to_price,
    price_to_tick,
    tick_to_sqrt_price_x96,
    sqrt_price_x96_to_tick,
)
