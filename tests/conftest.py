"""Pytest configuration for the precise_number test suite."""

import random
import sys
from pathlib import Path

import pytest

# Add repository root to path for precise_number imports
sys.path.insert(0, str(Path(__file__).parent.parent))

DEFAULT_ROUNDS = 10_000
SEED = 0xF64

# Exponents likely to trigger edge cases
SPECIAL_EXPS = [
    0x000,  # subnormal / zero
    0x001,  # smallest normal
    0x002,
    0x3FD,  # near 0.5
    0x3FE,  # 0.5 .. 1.0
    0x3FF,  # 1.0 .. 2.0
    0x400,  # 2.0 .. 4.0
    0x432,  # near int53 boundary
    0x433,  # 2^52 (ULP = 1)
    0x434,  # 2^53 (ULP = 2)
    0x7FD,  # near overflow
    0x7FE,  # largest finite
    0x7FF,  # inf / NaN
]

# Significands likely to trigger edge cases
SPECIAL_SIGS = [
    0x0000000000000,  # zero
    0x0000000000001,  # smallest
    0x0000000000002,
    0x4000000000000,  # mid-range single bit
    0x8000000000000,  # half (0.5 in the fraction)
    0xFFFFFFFFFFFFE,
    0xFFFFFFFFFFFFF,  # max
    0x0000000000010,  # low bits
]


def weighted_f64(rng: random.Random) -> int:
    """Generate a float64 bit pattern weighted toward boundary cases."""
    r: int = rng.randint(0, 99)
    if r < 30:
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    elif r < 50:
        exp = rng.randint(0, 0x7FF)
        sig = rng.choice(SPECIAL_SIGS)
    elif r < 60:
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.choice(SPECIAL_SIGS)
    else:
        exp = rng.randint(0, 0x7FF)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    sign = rng.randint(0, 1)
    return (sign << 63) | (exp << 52) | sig


def pytest_addoption(parser):
    """Add --rounds option for the randomized suites."""
    parser.addoption(
        "--rounds",
        action="store",
        type=int,
        default=DEFAULT_ROUNDS,
        help="Number of random float64 patterns per randomized test",
    )


@pytest.fixture
def rounds(request) -> int:
    return request.config.getoption("rounds")


@pytest.fixture
def f64_samples(rounds: int) -> list[int]:
    """Weighted random float64 bit patterns, all exponents and both signs."""
    rng = random.Random(SEED)
    return [weighted_f64(rng) for _ in range(rounds)]
