"""Exact decimal values of binary64 bit patterns.

Every operation runs through the trapped context in `config`, so a result
that would need rounding raises instead of coming back approximate.
"""

from __future__ import annotations

from decimal import Decimal

from .bits import EXP_BIAS, FRAC_BITS, FloatBits, decode_float
from .config import CONTEXT

ExactDecimal = Decimal

ONE: ExactDecimal = Decimal(1)


def pow2(n: int) -> ExactDecimal:
    """2**n. Negative powers use 2**-k == 5**k * 10**-k, which terminates."""
    if n >= 0:
        return Decimal(1 << n)
    return CONTEXT.scaleb(Decimal(5 ** (0 - n)), n)


def multiply(a: ExactDecimal, b: ExactDecimal) -> ExactDecimal:
    return CONTEXT.multiply(a, b)


def add(a: ExactDecimal, b: ExactDecimal) -> ExactDecimal:
    return CONTEXT.add(a, b)


def div_pow2(x: ExactDecimal, n: int) -> ExactDecimal:
    """x / 2**n."""
    return multiply(x, pow2(0 - n))


def equals(a: ExactDecimal, b: ExactDecimal) -> bool:
    """Exact numeric equality; 1.50 equals 1.5."""
    return CONTEXT.compare(a, b).is_zero()


def exact_decimal(bits: FloatBits) -> ExactDecimal:
    """Exact value of the exponent and mantissa fields (sign ignored)."""
    if bits.exponent == 0:
        # subnormal: no implicit leading 1, exponent pinned at 1 - bias
        fraction = div_pow2(Decimal(bits.mantissa), FRAC_BITS)
        power = pow2(1 - EXP_BIAS)
    else:
        fraction = add(div_pow2(Decimal(bits.mantissa), FRAC_BITS), ONE)
        power = pow2(bits.exponent - EXP_BIAS)
    return multiply(fraction, power)


def exact_value_of(positive: float) -> ExactDecimal:
    return exact_decimal(decode_float(positive))
