"""Exact float <-> string conversion.

`stringify` prints the exact decimal value of a float's bit pattern rather
than the shortest string that round-trips. `parse` only accepts literals a
float can hold exactly: after rounding, the exact value of the result is
recomputed and compared against the literal, and any difference is an error.
"""

from __future__ import annotations

import logging
import math

from .bits import is_negative_zero
from .errors import (
    ArityError,
    LiteralSyntaxError,
    MagnitudeError,
    PrecisionLossError,
    ValueTypeError,
)
from .exact import equals, exact_value_of
from .literal import is_numeric_literal, parse_literal, split_sign, to_plain_string

logger = logging.getLogger(__name__)

NAN: str = "NaN"
INFINITY: str = "Infinity"
NEG_INFINITY: str = "-Infinity"


def _single_param(params: tuple[object, ...]) -> object:
    if len(params) != 1:
        raise ArityError(1, len(params))
    return params[0]


def stringify(*params: object) -> str:
    """Exact decimal string for a float.

    >>> stringify(0.1)
    '0.1000000000000000055511151231257827021181583404541015625'
    """
    value = _single_param(params)
    if not isinstance(value, float):
        raise ValueTypeError("float", type(value).__name__)
    if math.isnan(value):
        return NAN
    if value == math.inf:
        return INFINITY
    if value == -math.inf:
        return NEG_INFINITY
    # Decimal formatting drops the sign of -0
    is_negative = value < 0 or is_negative_zero(value)
    positive = -value if is_negative else value
    text = to_plain_string(exact_value_of(positive))
    if is_negative:
        return "-" + text
    return text


def parse(*params: object) -> float:
    """Float whose exact value equals the literal, or an error.

    >>> parse("0.5")
    0.5
    """
    value = _single_param(params)
    if not isinstance(value, str):
        raise ValueTypeError("str", type(value).__name__)
    if value == NAN:
        return math.nan
    if value == INFINITY:
        return math.inf
    if value == NEG_INFINITY:
        return -math.inf
    if not is_numeric_literal(value):
        raise LiteralSyntaxError(value)
    is_negative, positive_literal = split_sign(value)
    exact_input = parse_literal(positive_literal)
    # correctly rounded, ties to even; may overflow to inf
    approx = float(exact_input)
    if not math.isfinite(approx):
        logger.debug("rejected %s: beyond float range", positive_literal)
        raise MagnitudeError(positive_literal)
    exact_round_trip = exact_value_of(approx)
    if not equals(exact_round_trip, exact_input):
        closest = to_plain_string(exact_round_trip)
        logger.debug("rejected %s: nearest float is %s", positive_literal, closest)
        raise PrecisionLossError(positive_literal, closest)
    if is_negative:
        return -approx
    return approx
