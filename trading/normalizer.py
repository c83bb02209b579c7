"""
Numeric normalization — human decimals to contract fixed-point text.
All arithmetic is Decimal; floats are converted through their repr.
Every operation runs in a local context wide enough to stay exact.
"""

from __future__ import annotations
from decimal import Decimal, Inexact, ROUND_HALF_UP, localcontext
from typing import Union

from exchange.models import Token

Number = Union[Decimal, str, int, float]

MIN_PREC = 28


def to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def _exact_product(a: Decimal, b: Decimal) -> str:
    """a * b rendered without exponent or trailing fractional zeros."""
    with localcontext() as ctx:
        ctx.prec = max(MIN_PREC, _digits(a) + _digits(b) + 1)
        ctx.traps[Inexact] = True
        product = a * b
        if product == 0:
            return "0"
        return format(product.normalize(), "f")


def format_quantity(quantity: Number, token: Token) -> str:
    """'12.3' with precision 4 -> '12.3000 XYZ'."""
    value = to_decimal(quantity)
    exp = Decimal(1).scaleb(-token.precision)
    with localcontext() as ctx:
        ctx.prec = max(MIN_PREC, max(value.adjusted(), 0) + token.precision + 2)
        fixed = value.quantize(exp, rounding=ROUND_HALF_UP)
    return f"{fixed:f} {token.code}"


def scale_quantity(quantity: Number, token: Token) -> str:
    return _exact_product(to_decimal(quantity), token.multiplier)


def scale_price(price: Number, ask_token: Token) -> str:
    """Prices are always expressed in ask-token units."""
    return _exact_product(to_decimal(price), ask_token.multiplier)


def symbol_code(token: Token) -> str:
    return f"{token.precision},{token.code}"
