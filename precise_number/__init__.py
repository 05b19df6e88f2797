"""Parse and stringify floats with full precision, or fail.

`stringify` returns the exact decimal value of a float. `parse` returns a
float only when its exact value equals the literal given.
"""

from __future__ import annotations

from .bits import FloatBits, decode_float as _decode_float
from .convert import parse as parse, stringify as stringify
from .errors import (
    ArityError as ArityError,
    ConfigError as ConfigError,
    LiteralSyntaxError as LiteralSyntaxError,
    MagnitudeError as MagnitudeError,
    PrecisionLossError as PrecisionLossError,
    PreciseNumberError as PreciseNumberError,
    ValueTypeError as ValueTypeError,
)
from .exact import ExactDecimal, exact_value_of as _get_exact_decimal

__all__ = [
    "ArityError",
    "ConfigError",
    "ExactDecimal",
    "FloatBits",
    "LiteralSyntaxError",
    "MagnitudeError",
    "PrecisionLossError",
    "PreciseNumberError",
    "ValueTypeError",
    "_decode_float",
    "_get_exact_decimal",
    "parse",
    "stringify",
]
