"""Error taxonomy for exact float conversion."""

from __future__ import annotations


class PreciseNumberError(Exception):
    """Base error for exact float conversion."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class ConfigError(PreciseNumberError, ValueError):
    """Invalid process-wide configuration."""


class ArityError(PreciseNumberError, TypeError):
    """Wrong number of arguments."""

    def __init__(self, expected: int, received: int):
        noun = "parameter" if expected == 1 else "parameters"
        super().__init__(f"Expected {expected} {noun}, received {received}")
        self.expected = expected
        self.received = received


class ValueTypeError(PreciseNumberError, TypeError):
    """Argument has the wrong dynamic type."""

    def __init__(self, expected: str, received: str):
        super().__init__(
            f'Expected value type of "{expected}", received "{received}"'
        )
        self.expected = expected
        self.received = received


class LiteralSyntaxError(PreciseNumberError, ValueError):
    """String is not a decimal literal."""

    def __init__(self, literal: str):
        super().__init__(f"Expected a numeric string, received {literal!r}")
        self.literal = literal


class MagnitudeError(PreciseNumberError, OverflowError):
    """Literal is beyond the finite float range."""

    def __init__(self, literal: str):
        super().__init__(
            f"Number {literal} is too large to be precisely represented as a float"
        )
        self.literal = literal


class PrecisionLossError(PreciseNumberError, ValueError):
    """Literal has no exact binary64 representation.

    `closest` is the exact decimal expansion of the nearest float.
    """

    def __init__(self, literal: str, closest: str):
        super().__init__(
            f"Number {literal} cannot be precisely represented as a float;"
            f" the closest we can get is {closest}"
        )
        self.literal = literal
        self.closest = closest
