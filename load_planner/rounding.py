from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP


PCT_QUANT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")
CM3_PER_M3 = Decimal("1000000")


def to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_pct(value: Decimal) -> Decimal:
    # ROUND_HALF_UP on Decimal rounds half away from zero
    return value.quantize(PCT_QUANT, rounding=ROUND_HALF_UP)


def ratio_pct(demand: Decimal, supply: Decimal) -> Decimal:
    if supply <= 0:
        return round_pct(ZERO)
    return round_pct(demand / supply * HUNDRED)


def format_decimal(value, places: int = 2) -> str:
    quant = Decimal(1).scaleb(-places)
    return str(to_decimal(value).quantize(quant, rounding=ROUND_HALF_UP))
