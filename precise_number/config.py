"""Process-wide decimal configuration.

Read once at import. The context is passed explicitly to every decimal
operation so the caller's thread-local `decimal.getcontext()` never affects
conversions, and nothing here is mutated afterwards.
"""

from __future__ import annotations

import decimal
import logging
import os
from typing import Mapping

from .errors import ConfigError

logger = logging.getLogger(__name__)

PRECISION_ENV: str = "PRECISE_NUMBER_PRECISION"
DEFAULT_PRECISION: int = 10000

# Longest exact expansion of a binary64 value is 767 significant digits
# (largest subnormal), so anything below this can round.
MIN_PRECISION: int = 800

TRAPS: list[type[decimal.DecimalException]] = [
    decimal.InvalidOperation,
    decimal.DivisionByZero,
    decimal.Overflow,
    decimal.Underflow,
    decimal.Inexact,
    decimal.Rounded,
]


def _read_precision(environ: Mapping[str, str]) -> int:
    raw = environ.get(PRECISION_ENV, "")
    if raw.strip() == "":
        return DEFAULT_PRECISION
    try:
        precision = int(raw)
    except ValueError:
        raise ConfigError(
            f"{PRECISION_ENV} must be an integer, received {raw!r}"
        ) from None
    if precision < MIN_PRECISION:
        raise ConfigError(
            f"{PRECISION_ENV} must be at least {MIN_PRECISION}, received {precision}"
        )
    return precision


def make_context(precision: int) -> decimal.Context:
    """Build a context that raises rather than rounds."""
    return decimal.Context(
        prec=precision,
        rounding=decimal.ROUND_HALF_EVEN,
        traps=TRAPS,
    )


PRECISION: int = _read_precision(os.environ)
CONTEXT: decimal.Context = make_context(PRECISION)

logger.debug("decimal working precision: %d digits", PRECISION)
