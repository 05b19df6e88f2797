"""Binary64 bit-field decoding."""

from __future__ import annotations

import struct
from typing import NamedTuple

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

F64_SIGN: int = 0x8000000000000000
F64_NEG_ZERO: int = F64_SIGN
EXP_MAX: int = 0x7FF
EXP_BIAS: int = 1023
FRAC_BITS: int = 52
FRAC_MASK: int = 0x000FFFFFFFFFFFFF

_F64 = struct.Struct("<d")
_U64 = struct.Struct("<Q")


class FloatBits(NamedTuple):
    """Decoded fields of a binary64 value."""

    sign: int
    exponent: int
    mantissa: int


# ---------------------------------------------------------------------------
# Raw bit patterns
# ---------------------------------------------------------------------------


def float_to_bits(value: float) -> int:
    return _U64.unpack(_F64.pack(value))[0]


def bits_to_float(ui: int) -> float:
    return _F64.unpack(_U64.pack(ui))[0]


def sign_f64(ui: int) -> int:
    return (ui >> 63) & 1


def exp_f64(ui: int) -> int:
    return (ui >> FRAC_BITS) & EXP_MAX


def frac_f64(ui: int) -> int:
    return ui & FRAC_MASK


def is_negative_zero(value: float) -> bool:
    """True only for -0.0; `-0.0 == 0.0` so this must look at the bits."""
    return float_to_bits(value) == F64_NEG_ZERO


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


def decode_float(value: float) -> FloatBits:
    """Split a non-negative finite float into its binary64 fields.

    Works byte by byte on the little-endian encoding. The mantissa is summed
    from byte values scaled by powers of 256 rather than masked out of one
    wide integer, so it never depends on the width of the shift operators.
    """
    b = _F64.pack(value)
    sign = (b[7] & 0b10000000) >> 7
    exponent = ((b[7] & 0b01111111) << 4) + ((b[6] & 0b11110000) >> 4)
    mantissa = (b[6] & 0b00001111) * 256**6
    for i in range(6):
        mantissa += b[i] * 256**i
    return FloatBits(sign, exponent, mantissa)
