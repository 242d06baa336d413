"""Basic mathematical value types and their text forms."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from enum import Enum

DOMAIN_MIN = -100000.0
DOMAIN_MAX = 100000.0

INVALID_FLOAT = 3.4028234663852886e38
"""Largest single-precision value; returned by :func:`parse_float` on bad input."""

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


@dataclass
class Interval:
    """A closed range of x values."""

    a: float
    b: float


class AsymptoteType(Enum):
    MINUS_X = 0
    PLUS_X = 1
    MINUS_Y = 2
    PLUS_Y = 3


@dataclass
class Equation:
    """A straight line ``y = offset + slope * x``."""

    offset: float = 0.0
    slope: float = 0.0
    valid: bool = False


@dataclass
class Domain:
    """An interval of the real line whose ends may be open or closed."""

    left: float = DOMAIN_MIN
    right: float = DOMAIN_MAX
    open_left: bool = False
    open_right: bool = False
    valid: bool = False

    def contains(self, x: float) -> bool:
        """Return True when ``x`` lies inside the domain."""
        inside_left = x > self.left if self.open_left else x >= self.left
        inside_right = x < self.right if self.open_right else x <= self.right
        return inside_left and inside_right


def format_equation(equation: Equation) -> str:
    """Render a line equation; a valid equation renders as an empty string."""
    if equation.valid:
        return ""
    text = f"y={equation.offset:f}"
    if equation.slope:
        if equation.slope > 0:
            text += f"+{equation.slope:f}x"
        else:
            text += f"-{equation.slope:f}x"
    return text


def format_domain(domain: Domain) -> str:
    """Render a domain in interval notation; an open left end renders only "("."""
    if domain.open_left:
        return "("
    left = "-inf" if domain.left == DOMAIN_MIN else f"{domain.left:.2f}"
    right = "inf" if domain.right == DOMAIN_MAX else f"{domain.right:.2f}"
    closing = ")" if domain.open_right else "]"
    return f"[{left},{right}{closing}"


def format_number(num: float, precision: int) -> str:
    """Render a number with a fixed count of decimals."""
    return f"{num:.{precision}f}"


def format_point(point: tuple[float, float]) -> str:
    """Render an (x, y) point with two decimals per coordinate."""
    x, y = point
    return f"{format_number(x, 2)} , {format_number(y, 2)}"


def parse_float(text: str) -> float:
    """Parse the leading number of ``text`` as a single-precision float.

    Returns ``INVALID_FLOAT`` when no number starts the text and raises
    ``OverflowError`` when the number does not fit in single precision.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return INVALID_FLOAT
    value = float(match.group(1))
    try:
        (single,) = struct.unpack("f", struct.pack("f", value))
    except OverflowError as exc:
        raise OverflowError(f"value out of range: {match.group(1)!r}") from exc
    return single


def is_digit(ch: str) -> bool:
    """Return True for a single ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"