"""Guarded arithmetic used when evaluating plotted functions.

Results that would leave the representable range saturate to ``INFINITE``;
results that are mathematically undefined are ``nan``.
"""

from __future__ import annotations

import math

INFINITE = 2147483647.0
"""Saturation value that stands in for an infinite result."""

EPSILON = 1e-8
"""Magnitudes below this count as zero."""


def dif_inf(x: float) -> bool:
    """Return True when ``x`` is far enough from the saturation value to be finite."""
    return abs(INFINITE - abs(x)) > INFINITE / 2.0


def logarithm(x: float) -> float:
    """Natural logarithm; ``nan`` for non-positive arguments."""
    if x <= 0:
        return math.nan
    if dif_inf(x):
        return math.log(x)
    return INFINITE


def exponential(x: float) -> float:
    """Exponential function, saturating for huge arguments."""
    if not dif_inf(x):
        return INFINITE
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def multiply(x: float, y: float) -> float:
    """Product of two operands; near-zero factors give exactly zero."""
    if abs(x) < EPSILON or abs(y) < EPSILON:
        return 0.0
    if dif_inf(x) and dif_inf(y):
        return x * y
    return INFINITE


def power(y: float, x: float) -> float:
    """Raise ``x`` to the power ``y`` (operands arrive exponent first)."""
    if x == 0:
        return 0.0
    if y == 0:
        return 1.0
    if x == INFINITE or y == INFINITE:
        return INFINITE
    try:
        return math.pow(x, y)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def equal(x: float, y: float) -> float:
    """1.0 when the operands are equal, else 0.0."""
    return float(x == y)


def different(x: float, y: float) -> float:
    """1.0 when the operands differ, else 0.0."""
    return float(x != y)


def smaller(x: float, y: float) -> float:
    """1.0 when the second operand is smaller than the first."""
    return float(y < x)


def bigger(x: float, y: float) -> float:
    """1.0 when the second operand is bigger than the first."""
    return float(y > x)


def plus(x: float, y: float) -> float:
    """Sum of two operands, saturating when either is infinite."""
    if dif_inf(x) and dif_inf(y):
        return x + y
    return INFINITE


def subtract(x: float, y: float) -> float:
    """Subtract the first operand from the second."""
    if dif_inf(x) and dif_inf(y):
        return y - x
    return INFINITE


def divide(x: float, y: float) -> float:
    """Divide the second operand by the first; ``nan`` when dividing by zero."""
    if x == 0:
        return math.nan
    if abs(x) > EPSILON:
        return y / x
    return INFINITE


def sinus(x: float) -> float:
    """Sine, saturating for infinite arguments."""
    if dif_inf(x):
        return math.sin(x)
    return INFINITE


def cosinus(x: float) -> float:
    """Cosine, saturating for infinite arguments."""
    if dif_inf(x):
        return math.cos(x)
    return INFINITE


def absolute(x: float) -> float:
    """Absolute value, saturating for infinite arguments."""
    if dif_inf(x):
        return abs(x)
    return INFINITE


def radical(x: float) -> float:
    """Square root; ``nan`` for negatives, saturated for values at or near zero."""
    if x < 0:
        return math.nan
    if dif_inf(x) and x > EPSILON:
        return math.sqrt(x)
    return INFINITE