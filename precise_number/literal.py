"""Decimal literal grammar and canonical formatting."""

from __future__ import annotations

import re
from decimal import Decimal

from .config import CONTEXT
from .exact import ExactDecimal

# ASCII digits only; `\d` would admit other Unicode digits.
LITERAL_RE = re.compile(r"-?(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")

# Exponents longer than this are saturated before reaching `Decimal`. Such a
# literal is far outside the float range either way, so saturating keeps the
# overflow/underflow outcome while staying within the decimal backend's limits.
MAX_EXPONENT_DIGITS: int = 15


def is_numeric_literal(text: str) -> bool:
    return LITERAL_RE.fullmatch(text) is not None


def split_sign(literal: str) -> tuple[bool, str]:
    """Returns (is_negative, unsigned literal)."""
    if literal.startswith("-"):
        return True, literal[1:]
    return False, literal


def _saturate_exponent(literal: str) -> str:
    mantissa, marker, exponent = literal.partition("e")
    if marker == "":
        mantissa, marker, exponent = literal.partition("E")
    if marker == "":
        return literal
    sign = ""
    if exponent[0] in "+-":
        sign = exponent[0]
        exponent = exponent[1:]
    if len(exponent.lstrip("0")) <= MAX_EXPONENT_DIGITS:
        return literal
    return mantissa + "e" + sign + "1" + "0" * MAX_EXPONENT_DIGITS


def parse_literal(literal: str) -> ExactDecimal:
    """Exact decimal value of a literal already checked by `is_numeric_literal`."""
    return Decimal(_saturate_exponent(literal))


def to_plain_string(value: ExactDecimal) -> str:
    """Plain notation with minimal digits: no exponent, no trailing zeros."""
    return format(CONTEXT.normalize(value), "f")
